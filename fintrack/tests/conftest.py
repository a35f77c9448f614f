from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator

# Settings are read once at import time, so the environment has to be in
# place before anything from ``fintrack`` is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="fintrack-tests-")
os.environ.setdefault("JWT_SECRET", "test-signing-secret-3f9a0c7d5e2b41a8b6c9")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'fintrack.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["ENABLE_RATE_LIMIT"] = "0"
os.environ["APP_ENV"] = "test"

import pytest  # noqa: E402

from fintrack.infrastructure.db import ENGINE, Base  # noqa: E402


@pytest.fixture()
def reset_database() -> Iterator[None]:
    from fintrack.infrastructure.db import models  # noqa: F401

    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from fintrack.infrastructure.db import ENGINE
from fintrack.shared.logging import logger


def check_database() -> dict[str, object]:
    t0 = perf_counter()
    try:
        with ENGINE.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning(f"health.database: err ({type(exc).__name__})")
        return {"ok": False, "database": "unavailable"}
    return {"ok": True, "database": "ok", "latency_ms": round((perf_counter() - t0) * 1000, 1)}


__all__ = ["check_database"]

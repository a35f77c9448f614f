# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class CredentialRecord:
    """Base64 encoded PBKDF2 output and the salt it was derived with."""

    hash: str
    salt: str


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    credential: CredentialRecord
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Claims:
    """Identity carried inside a session token.

    ``expires_at`` is a unix timestamp in seconds; ``None`` means the token
    never expires on its own and only the cookie max-age bounds it.
    """

    id: int
    username: str
    expires_at: int | None = None

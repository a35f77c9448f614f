# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies.

Credentials are derived with PBKDF2-HMAC-SHA256 (100k iterations, 256-bit
output) over a 16 byte random salt. Both the derived key and the salt are
stored base64 encoded.
"""

from __future__ import annotations

import base64
import binascii
import hmac
import secrets

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from fintrack.domain.users.entities import CredentialRecord
from fintrack.domain.users.repositories import CredentialHasher

SALT_BYTES = 16
KEY_BYTES = 32
ITERATIONS = 100_000


class Pbkdf2CredentialHasher(CredentialHasher):
    def __init__(self, *, iterations: int = ITERATIONS) -> None:
        self._iterations = iterations

    def _derive(self, password: str, salt: bytes) -> bytes:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=KEY_BYTES,
            salt=salt,
            iterations=self._iterations,
        )
        return kdf.derive(password.encode("utf-8"))

    def hash(self, password: str, salt: str | None = None) -> CredentialRecord:
        """Derive a credential for ``password``.

        Without ``salt`` a fresh random one is generated (registration); with
        it, the stored base64 salt is reused (login). A salt that is not valid
        base64 raises ``binascii.Error``.
        """
        if salt is None:
            raw_salt = secrets.token_bytes(SALT_BYTES)
        else:
            raw_salt = base64.b64decode(salt, validate=True)

        derived = self._derive(password, raw_salt)
        return CredentialRecord(
            hash=base64.b64encode(derived).decode("ascii"),
            salt=base64.b64encode(raw_salt).decode("ascii"),
        )

    def verify(self, password: str, record: CredentialRecord) -> bool:
        try:
            expected = base64.b64decode(record.hash, validate=True)
            raw_salt = base64.b64decode(record.salt, validate=True)
        except (binascii.Error, ValueError):
            return False
        return hmac.compare_digest(self._derive(password, raw_salt), expected)


__all__ = ["ITERATIONS", "KEY_BYTES", "SALT_BYTES", "Pbkdf2CredentialHasher"]

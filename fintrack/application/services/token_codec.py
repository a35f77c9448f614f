# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Compact HS256 session tokens.

Wire format: ``b64url(header).b64url(payload).b64url(signature)`` with the
``=`` padding stripped, as produced by PyJWT. Payload keys are emitted in
sorted order so identical claims always give identical tokens.
"""

from __future__ import annotations

import binascii
import time
from typing import Any

import jwt
from jwt.utils import base64url_decode, base64url_encode

from fintrack.domain.users.entities import Claims
from fintrack.domain.users.exceptions import (
    MalformedTokenError,
    SignatureMismatchError,
    TokenExpiredError,
    TokenRejectedError,
)
from fintrack.domain.users.repositories import TokenCodec
from fintrack.shared.logging import logger

ALGORITHM = "HS256"
HEADER: dict[str, str] = {"alg": ALGORITHM, "typ": "JWT"}
SEPARATOR = "."


def _check_signature_encoding(segment: str) -> None:
    # base64url decoding ignores the spare low bits of the last character, so
    # only the canonical spelling of a signature is accepted.
    try:
        canonical = base64url_encode(base64url_decode(segment)).decode("ascii")
    except (binascii.Error, ValueError) as exc:
        raise MalformedTokenError() from exc
    if canonical != segment:
        raise SignatureMismatchError()


def _claims_from_payload(payload: Any) -> Claims:
    if not isinstance(payload, dict):
        raise MalformedTokenError()
    user_id = payload.get("id")
    username = payload.get("username")
    expires_at = payload.get("exp")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise MalformedTokenError()
    if not isinstance(username, str):
        raise MalformedTokenError()
    if expires_at is not None and (
        not isinstance(expires_at, int) or isinstance(expires_at, bool)
    ):
        raise MalformedTokenError()
    return Claims(id=user_id, username=username, expires_at=expires_at)


class HmacTokenCodec(TokenCodec):
    """Issues and verifies self-contained session tokens.

    The codec holds no secret of its own; callers pass the process-wide
    signing secret on every call.
    """

    def issue(self, claims: Claims, secret: str) -> str:
        payload: dict[str, Any] = {"id": claims.id, "username": claims.username}
        if claims.expires_at is not None:
            payload["exp"] = claims.expires_at
        return jwt.encode(dict(sorted(payload.items())), secret, algorithm=ALGORITHM)

    def decode(self, token: str, secret: str, now: int | None = None) -> Claims:
        """Verify ``token`` and return its claims, raising on any defect."""
        segments = token.split(SEPARATOR)
        if len(segments) != 3 or not all(segments):
            raise MalformedTokenError()
        if not token.isascii():
            raise MalformedTokenError()
        _check_signature_encoding(segments[2])

        # An explicit ``now`` replaces PyJWT's wall-clock expiry check.
        options = {"verify_exp": now is None}
        try:
            payload = jwt.decode(token, secret, algorithms=[ALGORITHM], options=options)
            header = jwt.get_unverified_header(token)
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except jwt.InvalidSignatureError as exc:
            raise SignatureMismatchError() from exc
        except jwt.PyJWTError as exc:
            raise MalformedTokenError() from exc
        if header != HEADER:
            raise MalformedTokenError()

        claims = _claims_from_payload(payload)
        if now is not None and claims.expires_at is not None and now >= claims.expires_at:
            raise TokenExpiredError()
        return claims

    def verify(self, token: str, secret: str, now: int | None = None) -> Claims | None:
        try:
            return self.decode(token, secret, now)
        except TokenRejectedError as exc:
            logger.debug(f"token.verify: rejected ({type(exc).__name__})")
            return None


__all__ = ["ALGORITHM", "HEADER", "HmacTokenCodec"]

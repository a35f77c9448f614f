# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from werkzeug.http import parse_cookie

from fintrack.domain.users.entities import Claims
from fintrack.domain.users.repositories import TokenCodec


class SupportsHeaders(Protocol):
    @property
    def headers(self) -> Mapping[str, str]: ...


class AuthGate:
    """Turns an inbound request into ``Claims`` or ``None`` (unauthenticated).

    The token is read from the ``Cookie`` header only. A missing header, a
    missing or empty cookie and a token that fails verification all produce
    the same ``None`` result.
    """

    def __init__(self, *, tokens: TokenCodec, secret: str, cookie_name: str = "auth_token") -> None:
        self._tokens = tokens
        self._secret = secret
        self._cookie_name = cookie_name

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def extract_token(self, request: SupportsHeaders) -> str | None:
        raw = request.headers.get("Cookie")
        if not raw:
            return None
        return parse_cookie(raw).get(self._cookie_name) or None

    def authenticate(self, request: SupportsHeaders, now: int | None = None) -> Claims | None:
        token = self.extract_token(request)
        if token is None:
            return None
        return self._tokens.verify(token, self._secret, now)


__all__ = ["AuthGate"]

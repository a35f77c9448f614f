# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable

from fintrack.domain.users.entities import Claims
from fintrack.domain.users.exceptions import InvalidCredentialsError
from fintrack.domain.users.repositories import CredentialHasher, TokenCodec, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: CredentialHasher,
        tokens: TokenCodec,
        secret: str,
        token_ttl: int | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens
        self._secret = secret
        self._token_ttl = token_ttl
        self._clock = clock

    def execute(self, username: str, password: str) -> tuple[Claims, str]:
        user = self._users.find_by_username(username)
        if user is None:
            # Unknown usernames pay the same PBKDF2 cost as wrong passwords.
            self._password_hasher.hash(password)
            raise InvalidCredentialsError()
        if not self._password_hasher.verify(password, user.credential):
            raise InvalidCredentialsError()

        expires_at = None
        if self._token_ttl:
            expires_at = int(self._clock()) + self._token_ttl
        claims = Claims(id=user.id, username=user.username, expires_at=expires_at)
        return claims, self._tokens.issue(claims, self._secret)

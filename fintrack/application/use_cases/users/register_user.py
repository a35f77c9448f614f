# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from fintrack.domain.users.entities import User
from fintrack.domain.users.exceptions import UserAlreadyExistsError, UserLimitReachedError
from fintrack.domain.users.repositories import CredentialHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: CredentialHasher,
        max_users: int | None = None,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._max_users = max_users

    def execute(self, username: str, password: str) -> User:
        if self._max_users is not None and self._users.count() >= self._max_users:
            raise UserLimitReachedError()
        if self._users.find_by_username(username):
            raise UserAlreadyExistsError()
        credential = self._password_hasher.hash(password)
        return self._users.add(username, credential)

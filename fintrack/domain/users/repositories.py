# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Claims, CredentialRecord, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def count(self) -> int: ...
    def add(self, username: str, credential: CredentialRecord) -> User: ...


class CredentialHasher(Protocol):
    def hash(self, password: str, salt: str | None = None) -> CredentialRecord: ...
    def verify(self, password: str, record: CredentialRecord) -> bool: ...


class TokenCodec(Protocol):
    def issue(self, claims: Claims, secret: str) -> str: ...
    def verify(self, token: str, secret: str, now: int | None = None) -> Claims | None: ...

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from fintrack.domain.users.entities import CredentialRecord
from fintrack.domain.users.entities import User as DomainUser
from fintrack.domain.users.exceptions import UserAlreadyExistsError
from fintrack.domain.users.repositories import UserRepository
from fintrack.infrastructure.db.models import User
from fintrack.infrastructure.db.session import session_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        credential=CredentialRecord(hash=row.password_hash, salt=row.salt),
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_username(self, username: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.scalars(select(User).where(User.username == username)).first()
            if not row:
                return None
            return _to_domain(row)

    def count(self) -> int:
        with session_scope() as session:
            return int(session.scalar(select(func.count(User.id))) or 0)

    def add(self, username: str, credential: CredentialRecord) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    username=username,
                    password_hash=credential.hash,
                    salt=credential.salt,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            raise UserAlreadyExistsError() from exc

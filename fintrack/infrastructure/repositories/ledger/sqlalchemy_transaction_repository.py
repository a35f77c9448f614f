# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import case, func, select

from fintrack.domain.ledger.entities import EntryType
from fintrack.domain.ledger.entities import Transaction as DomainTransaction
from fintrack.domain.ledger.repositories import TransactionRepository
from fintrack.infrastructure.db.models import Transaction, User
from fintrack.infrastructure.db.session import session_scope


class SqlAlchemyTransactionRepository(TransactionRepository):
    def add(self, entry: DomainTransaction) -> DomainTransaction:
        with session_scope() as session:
            row = Transaction(
                user_id=entry.user_id,
                type=entry.type.value,
                reason=entry.reason,
                amount=entry.amount,
                created_at=entry.created_at,
            )
            session.add(row)
            session.flush()
            return DomainTransaction(
                id=row.id,
                user_id=row.user_id,
                type=EntryType(row.type),
                reason=row.reason,
                amount=row.amount,
                created_at=row.created_at,
                author=entry.author,
            )

    def list_page(self, *, limit: int, offset: int) -> Sequence[DomainTransaction]:
        stmt = (
            select(Transaction, User.username)
            .outerjoin(User, Transaction.user_id == User.id)
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
            .limit(limit)
            .offset(offset)
        )
        with session_scope() as session:
            rows = session.execute(stmt).all()
        return [
            DomainTransaction(
                id=row.id,
                user_id=row.user_id,
                type=EntryType(row.type),
                reason=row.reason,
                amount=row.amount,
                created_at=row.created_at,
                author=author,
            )
            for row, author in rows
        ]

    def total(self) -> float:
        signed = case(
            (Transaction.type == EntryType.CREDIT.value, Transaction.amount),
            else_=-Transaction.amount,
        )
        with session_scope() as session:
            value = session.scalar(select(func.coalesce(func.sum(signed), 0.0)))
        return float(value or 0.0)

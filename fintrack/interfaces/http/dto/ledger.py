# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from fintrack.domain.ledger.entities import (
    MAX_PAGE,
    MAX_REASON_LENGTH,
    EntryType,
    LedgerPage,
    Transaction,
)
from fintrack.shared.errors.validation_types import ValidationErrorType


class AddTransactionRequestDTO(BaseModel):
    type: EntryType
    reason: str = Field(max_length=MAX_REASON_LENGTH)
    # The frontend posts the raw input value, so numeric strings are accepted.
    amount: float = Field(gt=0, allow_inf_nan=False)

    @field_validator("reason")
    @classmethod
    def validate_reason(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.TRANSACTION_REASON_BLANK.value,
                "Reason cannot be empty",
                {},
            )
        return value


class ListTransactionsQueryDTO(BaseModel):
    page: int = Field(1, ge=1, le=MAX_PAGE)


class TransactionDTO(BaseModel):
    id: int
    user_id: int
    type: EntryType
    reason: str
    amount: float
    created_at: int
    author: str | None = None

    @classmethod
    def from_domain(cls, entry: Transaction) -> TransactionDTO:
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            type=entry.type,
            reason=entry.reason,
            amount=entry.amount,
            created_at=entry.created_at,
            author=entry.author,
        )


class LedgerPageDTO(BaseModel):
    transactions: list[TransactionDTO]
    total: float
    user: str
    page: int
    has_more: bool

    @classmethod
    def from_domain(cls, page: LedgerPage, *, user: str) -> LedgerPageDTO:
        return cls(
            transactions=[TransactionDTO.from_domain(t) for t in page.transactions],
            total=page.total,
            user=user,
            page=page.page,
            has_more=page.has_more,
        )


class TransactionCreatedDTO(BaseModel):
    ok: bool = True
    id: int

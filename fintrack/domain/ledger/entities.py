# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Ledger entries shared by every registered user."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from fintrack.domain.exceptions import InvariantViolationError

MAX_REASON_LENGTH = 256
# Keeps page * page_size inside a 64-bit SQL OFFSET.
MAX_PAGE = 1_000_000


class EntryType(str, Enum):
    CREDIT = "credit"
    DEBIT = "debit"


@dataclass(slots=True, frozen=True)
class Transaction:
    """A single credit or debit written by ``user_id``."""

    id: int
    user_id: int
    type: EntryType
    reason: str
    amount: float
    created_at: int
    author: str | None = None

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "type", EntryType(self.type))
        except ValueError as exc:
            raise InvariantViolationError("type must be credit or debit", field="type") from exc
        if not math.isfinite(self.amount) or self.amount <= 0:
            raise InvariantViolationError("amount must be a positive number", field="amount")
        if len(self.reason) > MAX_REASON_LENGTH:
            raise InvariantViolationError("reason is too long", field="reason")
        if self.created_at < 0:
            raise InvariantViolationError("created_at must be >= 0", field="created_at")

    @property
    def signed_amount(self) -> float:
        return self.amount if self.type is EntryType.CREDIT else -self.amount


@dataclass(slots=True, frozen=True)
class LedgerPage:
    transactions: tuple[Transaction, ...]
    total: float
    page: int
    page_size: int

    @property
    def has_more(self) -> bool:
        return len(self.transactions) == self.page_size

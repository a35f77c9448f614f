# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable

from fintrack.domain.ledger.entities import EntryType, Transaction
from fintrack.domain.ledger.repositories import TransactionRepository
from fintrack.domain.users.entities import Claims


def _now_ms() -> int:
    return int(time.time() * 1000)


class AddTransactionUseCase:
    def __init__(
        self,
        *,
        transactions: TransactionRepository,
        clock_ms: Callable[[], int] = _now_ms,
    ) -> None:
        self._transactions = transactions
        self._clock_ms = clock_ms

    def execute(
        self, author: Claims, type: EntryType, reason: str, amount: float
    ) -> Transaction:
        entry = Transaction(
            id=0,
            user_id=author.id,
            type=type,
            reason=reason,
            amount=amount,
            created_at=self._clock_ms(),
            author=author.username,
        )
        return self._transactions.add(entry)

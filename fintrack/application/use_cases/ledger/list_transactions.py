# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from fintrack.domain.ledger.entities import MAX_PAGE, LedgerPage
from fintrack.domain.ledger.repositories import TransactionRepository


class ListTransactionsUseCase:
    """Newest-first page of the shared ledger plus its overall balance."""

    def __init__(self, *, transactions: TransactionRepository, page_size: int = 100) -> None:
        self._transactions = transactions
        self._page_size = page_size

    def execute(self, page: int = 1) -> LedgerPage:
        page = min(max(1, page), MAX_PAGE)
        rows = self._transactions.list_page(
            limit=self._page_size, offset=(page - 1) * self._page_size
        )
        return LedgerPage(
            transactions=tuple(rows),
            total=self._transactions.total(),
            page=page,
            page_size=self._page_size,
        )

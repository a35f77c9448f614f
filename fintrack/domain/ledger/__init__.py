# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import MAX_PAGE, EntryType, LedgerPage, Transaction
from .repositories import TransactionRepository

__all__ = ["MAX_PAGE", "EntryType", "LedgerPage", "Transaction", "TransactionRepository"]

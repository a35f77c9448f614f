# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Transaction


class TransactionRepository(Protocol):
    def add(self, entry: Transaction) -> Transaction: ...
    def list_page(self, *, limit: int, offset: int) -> Sequence[Transaction]: ...
    def total(self) -> float: ...

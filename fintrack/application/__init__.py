# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.ledger.add_transaction import AddTransactionUseCase
from .use_cases.ledger.list_transactions import ListTransactionsUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "AddTransactionUseCase",
    "ListTransactionsUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
]

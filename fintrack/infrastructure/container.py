# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from fintrack.application.services.auth_gate import AuthGate
from fintrack.application.services.password_hashing import Pbkdf2CredentialHasher
from fintrack.application.services.token_codec import HmacTokenCodec
from fintrack.application.use_cases.ledger.add_transaction import AddTransactionUseCase
from fintrack.application.use_cases.ledger.list_transactions import ListTransactionsUseCase
from fintrack.application.use_cases.users.login_user import LoginUserUseCase
from fintrack.application.use_cases.users.register_user import RegisterUserUseCase
from fintrack.infrastructure.repositories.ledger.sqlalchemy_transaction_repository import (
    SqlAlchemyTransactionRepository,
)
from fintrack.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from fintrack.interfaces.http.controllers.auth_controller import AuthController
from fintrack.interfaces.http.controllers.frontend_controller import FrontendController
from fintrack.interfaces.http.controllers.ledger_controller import LedgerController
from fintrack.interfaces.http.controllers.misc_controller import MiscController
from fintrack.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def signing_secret(self) -> str:
        return self.config.require_signing_secret()

    @cached_property
    def password_hasher(self) -> Pbkdf2CredentialHasher:
        return Pbkdf2CredentialHasher()

    @cached_property
    def token_codec(self) -> HmacTokenCodec:
        return HmacTokenCodec()

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(
            tokens=self.token_codec,
            secret=self.signing_secret,
            cookie_name=self.config.auth.cookie_name,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def transaction_repository(self) -> SqlAlchemyTransactionRepository:
        return SqlAlchemyTransactionRepository()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            max_users=self.config.auth.max_users,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_codec,
            secret=self.signing_secret,
            token_ttl=self.config.auth.token_ttl,
        )

    @cached_property
    def add_transaction_use_case(self) -> AddTransactionUseCase:
        return AddTransactionUseCase(transactions=self.transaction_repository)

    @cached_property
    def list_transactions_use_case(self) -> ListTransactionsUseCase:
        return ListTransactionsUseCase(
            transactions=self.transaction_repository,
            page_size=self.config.ledger.page_size,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            cookie_name=self.config.auth.cookie_name,
            cookie_max_age=self.config.auth.token_ttl,
            security=self.config.security,
        )

    @cached_property
    def ledger_controller(self) -> LedgerController:
        return LedgerController(
            gate=self.auth_gate,
            add_transaction=self.add_transaction_use_case,
            list_transactions=self.list_transactions_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()

    @cached_property
    def frontend_controller(self) -> FrontendController:
        return FrontendController(ledger=self.config.ledger)

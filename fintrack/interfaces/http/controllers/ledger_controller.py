# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from fintrack.application.services.auth_gate import AuthGate
from fintrack.application.use_cases.ledger.add_transaction import AddTransactionUseCase
from fintrack.application.use_cases.ledger.list_transactions import ListTransactionsUseCase
from fintrack.infrastructure.audit import AuditAction, audit_log
from fintrack.interfaces.http.auth import auth_required, current_claims
from fintrack.interfaces.http.dto.ledger import (
    AddTransactionRequestDTO,
    LedgerPageDTO,
    ListTransactionsQueryDTO,
    TransactionCreatedDTO,
)
from fintrack.shared.errors.validation import raise_validation_error
from fintrack.shared.logging import logger


class LedgerController:
    def __init__(
        self,
        *,
        gate: AuthGate,
        add_transaction: AddTransactionUseCase,
        list_transactions: ListTransactionsUseCase,
    ) -> None:
        self.gate = gate
        self._add_transaction = add_transaction
        self._list_transactions = list_transactions

    @auth_required
    def create(self) -> tuple[Response, int]:
        claims = current_claims()
        try:
            dto = AddTransactionRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        entry = self._add_transaction.execute(
            author=claims,
            type=dto.type,
            reason=dto.reason,
            amount=dto.amount,
        )

        audit_log(
            AuditAction.TRANSACTION_ADDED,
            user_id=claims.id,
            details={"transaction_id": entry.id, "type": entry.type.value, "amount": entry.amount},
            success=True,
        )
        logger.info(f"ledger.create: ok user_id={claims.id} id={entry.id}")
        return jsonify(TransactionCreatedDTO(id=entry.id).model_dump()), 201

    @auth_required
    def list_page(self) -> tuple[Response, int]:
        claims = current_claims()
        try:
            query = ListTransactionsQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)

        page = self._list_transactions.execute(page=query.page)
        logger.debug(
            f"ledger.list: user_id={claims.id} page={page.page} rows={len(page.transactions)}"
        )
        dto = LedgerPageDTO.from_domain(page, user=claims.username)
        return jsonify(dto.model_dump(mode="json")), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("ledger", __name__, url_prefix="/api")
        bp.add_url_rule("/transactions", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/transactions", view_func=self.list_page, methods=["GET"])
        return bp

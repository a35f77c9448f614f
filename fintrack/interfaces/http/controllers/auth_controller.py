# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from fintrack.application.use_cases.users.login_user import LoginUserUseCase
from fintrack.application.use_cases.users.register_user import RegisterUserUseCase
from fintrack.domain.users.exceptions import InvalidCredentialsError
from fintrack.infrastructure.audit import AuditAction, audit_log
from fintrack.interfaces.http.dto.auth import AuthSuccessDTO, LoginRequestDTO, RegisterRequestDTO
from fintrack.shared.config.settings import SecurityConfig
from fintrack.shared.errors import AppError
from fintrack.shared.errors.validation import raise_validation_error
from fintrack.shared.logging import logger
from fintrack.shared.middleware.client_ip import client_ip
from fintrack.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        cookie_name: str = "auth_token",
        cookie_max_age: int = 60 * 60 * 24,
        security: SecurityConfig | None = None,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._cookie_name = cookie_name
        self._cookie_max_age = cookie_max_age
        self._security = security or SecurityConfig()  # type: ignore[call-arg]

    def _set_session_cookie(self, response: Response, token: str, max_age: int) -> None:
        response.set_cookie(
            self._cookie_name,
            token,
            max_age=max_age,
            path="/",
            httponly=True,
            secure=self._security.cookie_secure,
            samesite=self._security.cookie_samesite,
        )

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            user = self._register_use_case.execute(dto.username, dto.password)
        except AppError as exc:
            audit_log(
                AuditAction.REGISTER_REJECTED,
                ip_address=client_ip(),
                details={"username": dto.username, "reason": exc.code},
                success=False,
            )
            raise

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=client_ip(),
            details={"username": dto.username},
            success=True,
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(AuthSuccessDTO().model_dump()), 201

    @rate_limit(limit=10, window_seconds=60.0)
    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = client_ip()

        try:
            claims, token = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=claims.id,
            ip_address=ip_address,
            details={"username": claims.username},
            success=True,
        )

        response = jsonify(AuthSuccessDTO().model_dump())
        self._set_session_cookie(response, token, self._cookie_max_age)
        logger.info(f"auth.login: ok user_id={claims.id}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        audit_log(AuditAction.LOGOUT, ip_address=client_ip(), success=True)

        response = jsonify(AuthSuccessDTO().model_dump())
        self._set_session_cookie(response, "", 0)
        logger.info("auth.logout: ok")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST", "DELETE"])
        return bp

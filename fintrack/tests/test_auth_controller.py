from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from fintrack.application.use_cases.users.login_user import LoginUserUseCase
from fintrack.application.use_cases.users.register_user import RegisterUserUseCase
from fintrack.domain.users.entities import Claims, CredentialRecord, User
from fintrack.domain.users.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserLimitReachedError,
)
from fintrack.interfaces.http.controllers.auth_controller import AuthController
from fintrack.shared.config.settings import SecurityConfig
from fintrack.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _security() -> SecurityConfig:
    return SecurityConfig(cookie_secure=True, cookie_samesite="Strict")  # type: ignore[call-arg]


def test_register_returns_201_without_cookie(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str]] = {}

    class StubRegister:
        def execute(self, username: str, password: str) -> User:
            register_called["args"] = (username, password)
            return User(
                id=1,
                username=username,
                credential=CredentialRecord(hash="h", salt="s"),
                created_at=datetime.now(UTC),
            )

    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, StubRegister()),
        login_use_case=MagicMock(),
        security=_security(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register", json={"username": "alice", "password": "secret123"}
        )

    assert response.status_code == 201
    assert response.get_json() == {"ok": True}
    assert register_called["args"] == ("alice", "secret123")
    assert "Set-Cookie" not in response.headers


@pytest.mark.parametrize(
    ("error", "status", "code"),
    [
        (UserAlreadyExistsError(), 400, "username_taken"),
        (UserLimitReachedError(), 403, "user_limit_reached"),
    ],
)
def test_register_rejections(flask_app: Flask, error: Exception, status: int, code: str) -> None:
    register = MagicMock()
    register.execute.side_effect = error
    controller = AuthController(
        register_use_case=register, login_use_case=MagicMock(), security=_security()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/register", json={"username": "alice", "password": "pw"})

    assert response.status_code == status
    assert response.get_json() == {"error": code}


def test_login_sets_hardened_cookie(flask_app: Flask) -> None:
    class StubLogin:
        def execute(self, username: str, password: str) -> tuple[Claims, str]:
            return Claims(id=1, username=username), "token123"

    controller = AuthController(
        register_use_case=MagicMock(),
        login_use_case=cast(LoginUserUseCase, StubLogin()),
        cookie_max_age=86400,
        security=_security(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"username": "alice", "password": "pw123"})

    assert response.status_code == 200
    assert response.get_json() == {"ok": True}
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("auth_token=token123;")
    assert "HttpOnly" in cookie
    assert "Secure" in cookie
    assert "SameSite=Strict" in cookie
    assert "Path=/" in cookie
    assert "Max-Age=86400" in cookie


def test_login_invalid_credentials_returns_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=login, security=_security()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"username": "alice", "password": "nope"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid_credentials"}
    assert "Set-Cookie" not in response.headers


def test_login_invalid_payload_returns_422(flask_app: Flask) -> None:
    login = MagicMock()
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=login, security=_security()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"username": "a"})

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert "password" in payload["context"]["fields"]
    login.execute.assert_not_called()


def test_validation_error_never_echoes_password(flask_app: Flask) -> None:
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=MagicMock(), security=_security()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register", json={"username": "bad name!", "password": "hunter2"}
        )

    assert response.status_code == 422
    assert "hunter2" not in response.get_data(as_text=True)


def test_logout_expires_cookie(flask_app: Flask) -> None:
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=MagicMock(), security=_security()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        post = client.post("/api/auth/logout")
        delete = client.delete("/api/auth/logout")

    for response in (post, delete):
        assert response.status_code == 200
        cookie = response.headers["Set-Cookie"]
        assert cookie.startswith("auth_token=;")
        assert "Max-Age=0" in cookie

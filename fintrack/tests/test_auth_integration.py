from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from fintrack.app import create_app
from fintrack.infrastructure.db import SessionLocal
from fintrack.infrastructure.db.models import Transaction, User


def _token_from(response) -> str:
    cookie = response.headers["Set-Cookie"]
    first = cookie.split(";", 1)[0]
    name, _, value = first.partition("=")
    assert name == "auth_token"
    return value


@pytest.fixture()
def app(reset_database: None) -> Flask:
    return create_app()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    # Cookies are sent explicitly so each request controls its own Cookie header.
    return app.test_client(use_cookies=False)


def _register_and_login(client: FlaskClient, username: str, password: str) -> str:
    register = client.post("/api/auth/register", json={"username": username, "password": password})
    assert register.status_code == 201
    login = client.post("/api/auth/login", json={"username": username, "password": password})
    assert login.status_code == 200
    return _token_from(login)


def test_register_login_and_use_ledger(client: FlaskClient) -> None:
    token = _register_and_login(client, "alice", "pw123")
    cookie = {"Cookie": f"auth_token={token}"}

    created = client.post(
        "/api/transactions",
        json={"type": "credit", "reason": "Salary", "amount": "1500.50"},
        headers=cookie,
    )
    assert created.status_code == 201
    body = created.get_json()
    assert body["ok"] is True
    assert isinstance(body["id"], int)

    client.post(
        "/api/transactions",
        json={"type": "debit", "reason": "Rent", "amount": 500},
        headers=cookie,
    )

    listing = client.get("/api/transactions", headers=cookie)
    assert listing.status_code == 200
    data = listing.get_json()
    assert data["user"] == "alice"
    assert data["page"] == 1
    assert data["total"] == pytest.approx(1000.5)
    assert [t["reason"] for t in data["transactions"]] == ["Rent", "Salary"]
    assert data["transactions"][0]["type"] == "debit"
    assert data["transactions"][0]["author"] == "alice"

    session = SessionLocal()
    try:
        assert session.query(User).count() == 1
        assert session.query(Transaction).count() == 2
        stored = session.query(User).one()
        assert stored.password_hash != "pw123"
        assert len(stored.salt) == 24
    finally:
        session.close()


def test_ledger_is_shared_between_users(client: FlaskClient) -> None:
    alice = _register_and_login(client, "alice", "pw123")
    bob = _register_and_login(client, "bob", "pw456")

    client.post(
        "/api/transactions",
        json={"type": "credit", "reason": "Gift", "amount": 20},
        headers={"Cookie": f"auth_token={alice}"},
    )
    listing = client.get("/api/transactions", headers={"Cookie": f"auth_token={bob}"})

    data = listing.get_json()
    assert data["user"] == "bob"
    assert [t["author"] for t in data["transactions"]] == ["alice"]


def test_gated_routes_require_cookie(client: FlaskClient) -> None:
    assert client.get("/api/transactions").status_code == 401
    response = client.post(
        "/api/transactions", json={"type": "credit", "reason": "x", "amount": 1}
    )
    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthorized"}


def test_tampered_token_is_rejected(client: FlaskClient) -> None:
    token = _register_and_login(client, "alice", "pw123")
    header, payload, signature = token.split(".")
    tampered = f"{header}.{payload}.{signature[:-2]}xx"

    response = client.get("/api/transactions", headers={"Cookie": f"auth_token={tampered}"})

    assert response.status_code == 401


def test_login_failures_are_indistinguishable(client: FlaskClient) -> None:
    _register_and_login(client, "alice", "pw123")

    wrong_password = client.post(
        "/api/auth/login", json={"username": "alice", "password": "wrongpw"}
    )
    unknown_user = client.post("/api/auth/login", json={"username": "ghost", "password": "pw123"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.get_json() == unknown_user.get_json() == {"error": "invalid_credentials"}


def test_duplicate_registration(client: FlaskClient) -> None:
    _register_and_login(client, "alice", "pw123")

    again = client.post("/api/auth/register", json={"username": "alice", "password": "other"})

    assert again.status_code == 400
    assert again.get_json() == {"error": "username_taken"}


def test_invalid_transaction_payload(client: FlaskClient) -> None:
    token = _register_and_login(client, "alice", "pw123")
    cookie = {"Cookie": f"auth_token={token}"}

    for body in (
        {"type": "transfer", "reason": "x", "amount": 1},
        {"type": "credit", "reason": "   ", "amount": 1},
        {"type": "credit", "reason": "x", "amount": -3},
        {"type": "credit", "reason": "x" * 257, "amount": 1},
    ):
        response = client.post("/api/transactions", json=body, headers=cookie)
        assert response.status_code == 422, body


def test_out_of_range_page_is_rejected(client: FlaskClient) -> None:
    token = _register_and_login(client, "alice", "pw123")
    cookie = {"Cookie": f"auth_token={token}"}

    for page in ("99999999999999999999", "1000001", "0", "-1"):
        response = client.get(f"/api/transactions?page={page}", headers=cookie)
        assert response.status_code == 422, page
        assert response.get_json()["error"] == "validation_error"

    last = client.get("/api/transactions?page=1000000", headers=cookie)
    assert last.status_code == 200
    assert last.get_json()["transactions"] == []


def test_logout_clears_cookie(client: FlaskClient) -> None:
    _register_and_login(client, "alice", "pw123")

    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("auth_token=;")
    assert "Max-Age=0" in cookie


def test_security_headers_and_health(client: FlaskClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json()["ok"] is True
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_frontend_shell(client: FlaskClient) -> None:
    index = client.get("/")
    manifest = client.get("/manifest.json")
    worker = client.get("/sw.js")

    assert index.status_code == 200
    assert "Finance Tracker" in index.get_data(as_text=True)
    assert manifest.mimetype == "application/manifest+json"
    assert manifest.get_json()["start_url"] == "/"
    assert worker.mimetype == "application/javascript"

import pytest

from fintrack.shared.config import AppConfig, MissingSecretError


def _config(monkeypatch: pytest.MonkeyPatch, **env: str) -> AppConfig:
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return AppConfig()  # type: ignore[call-arg]


def test_missing_secret_refuses_to_start(monkeypatch: pytest.MonkeyPatch) -> None:
    config = _config(monkeypatch, JWT_SECRET="")

    with pytest.raises(MissingSecretError):
        config.require_signing_secret()


def test_blank_secret_counts_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    config = _config(monkeypatch, JWT_SECRET="   ")

    with pytest.raises(MissingSecretError):
        config.require_signing_secret()


def test_secret_is_not_in_repr(monkeypatch: pytest.MonkeyPatch) -> None:
    config = _config(monkeypatch, JWT_SECRET="very-private-value")

    assert config.require_signing_secret() == "very-private-value"
    assert "very-private-value" not in repr(config)


def test_comma_separated_origins(monkeypatch: pytest.MonkeyPatch) -> None:
    config = _config(
        monkeypatch, ALLOWED_ORIGINS="https://a.example, https://b.example"
    )

    assert config.security.allowed_origins == ["https://a.example", "https://b.example"]


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MAX_USERS", raising=False)
    config = _config(monkeypatch, COOKIE_SECURE="1")

    assert config.auth.cookie_name == "auth_token"
    assert config.auth.token_ttl == 86400
    assert config.auth.max_users is None
    assert config.security.cookie_secure is True
    assert config.ledger.page_size == 100


def test_max_users_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    config = _config(monkeypatch, MAX_USERS="2")

    assert config.auth.max_users == 2

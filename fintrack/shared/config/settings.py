# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_WEAK_SECRETS = ("dev", "development", "test", "secret", "changeme")


class MissingSecretError(RuntimeError):
    """Raised at startup when no token signing secret is configured."""

    def __init__(self) -> None:
        super().__init__("JWT_SECRET is not set; refusing to start without a signing secret")


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///fintrack.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", validate_by_name=True
    )


class SecurityConfig(BaseSettings):
    # Cookie security
    cookie_secure: bool = Field(True, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Strict", alias="COOKIE_SAMESITE")

    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # Rate limiting
    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")
    rate_limit_requests: int = Field(10, alias="RL_LIMIT")
    rate_limit_window: float = Field(60.0, alias="RL_WINDOW")

    # Number of reverse proxies whose X-Forwarded-For is trusted; 0 trusts none
    trusted_proxies: int = Field(0, ge=0, alias="TRUSTED_PROXIES")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", validate_by_name=True
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("cookie_secure", "enable_rate_limit", "enable_hsts", mode="before")
    @classmethod
    def _parse_flags(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class AuthConfig(BaseSettings):
    jwt_secret: str = Field("", alias="JWT_SECRET", repr=False)
    cookie_name: str = Field("auth_token", alias="AUTH_COOKIE_NAME")
    token_ttl: int = Field(60 * 60 * 24, ge=1, alias="AUTH_TOKEN_TTL")
    max_users: int | None = Field(None, ge=0, alias="MAX_USERS")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", validate_by_name=True
    )

    @field_validator("max_users", mode="before")
    @classmethod
    def _parse_max_users(cls, value: str | int | None) -> int | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class LedgerConfig(BaseSettings):
    page_size: int = Field(100, ge=1, le=1000, alias="LEDGER_PAGE_SIZE")
    currency_symbol: str = Field("$", alias="CURRENCY_SYMBOL")
    force_locale: str = Field("", alias="FORCE_LOCALE")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", validate_by_name=True
    )


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


def _auth_config_factory() -> AuthConfig:
    return AuthConfig()  # type: ignore[call-arg]


def _ledger_config_factory() -> LedgerConfig:
    return LedgerConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)
    auth: AuthConfig = Field(default_factory=_auth_config_factory)
    ledger: LedgerConfig = Field(default_factory=_ledger_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.auth.jwt_secret.lower() in _WEAK_SECRETS:
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure JWT_SECRET detected in production!\n"
                "   JWT_SECRET must be a strong random value in production.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if not self.security.cookie_secure:
            warnings.append("⚠️  Cookie Secure flag is DISABLED (use HTTPS!)")
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if not self.security.enable_hsts:
            warnings.append("⚠️  HSTS is DISABLED (recommended for HTTPS)")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)
            print(
                "   Consider enabling these security features in production.\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def require_signing_secret(self) -> str:
        secret = self.auth.jwt_secret
        if not secret or not secret.strip():
            raise MissingSecretError()
        return secret


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "AuthConfig",
    "DatabaseConfig",
    "LedgerConfig",
    "MissingSecretError",
    "SecurityConfig",
    "load_config",
]

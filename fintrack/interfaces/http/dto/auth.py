# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from fintrack.shared.errors.validation_types import ValidationErrorType

USERNAME_PATTERN = r"^[A-Za-z0-9_.\-]+$"


def _validate_username(value: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError(
            ValidationErrorType.MISSING.value,
            "Username cannot be empty",
            {},
        )

    if not re.match(USERNAME_PATTERN, value):
        raise PydanticCustomError(
            ValidationErrorType.USERNAME_INVALID_CHARS.value,
            "Username may contain only ASCII letters, digits, '_', '.' and '-'",
            {"pattern": USERNAME_PATTERN},
        )

    return value


class RegisterRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=256)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _validate_username(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_BLANK.value,
                "Password cannot be blank",
                {},
            )
        return value


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=256)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _validate_username(value)


class AuthSuccessDTO(BaseModel):
    ok: bool = True

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from fintrack.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "username_taken"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED


class UserLimitReachedError(DomainError):
    code = "user_limit_reached"
    status = HTTPStatus.FORBIDDEN


class TokenRejectedError(DomainError):
    """Base for every token failure; all subclasses share one public code."""

    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED


class MalformedTokenError(TokenRejectedError):
    pass


class SignatureMismatchError(TokenRejectedError):
    pass


class TokenExpiredError(TokenRejectedError):
    pass

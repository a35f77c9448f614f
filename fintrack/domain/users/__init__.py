# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Claims, CredentialRecord, User
from .exceptions import (
    InvalidCredentialsError,
    MalformedTokenError,
    SignatureMismatchError,
    TokenExpiredError,
    TokenRejectedError,
    UserAlreadyExistsError,
    UserLimitReachedError,
)

__all__ = [
    "Claims",
    "CredentialRecord",
    "InvalidCredentialsError",
    "MalformedTokenError",
    "SignatureMismatchError",
    "TokenExpiredError",
    "TokenRejectedError",
    "User",
    "UserAlreadyExistsError",
    "UserLimitReachedError",
]

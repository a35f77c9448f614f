# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, Protocol, TypeVar, cast

from flask import g, request

from fintrack.application.services.auth_gate import AuthGate
from fintrack.domain.users.entities import Claims
from fintrack.shared.errors import UnauthorizedError
from fintrack.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


class GatedController(Protocol):
    gate: AuthGate


def current_claims() -> Claims:
    """Return the identity resolved by ``auth_required`` for this request."""
    claims = getattr(g, "claims", None)
    if claims is None:
        raise UnauthorizedError()
    return cast(Claims, claims)


def auth_required(f: F) -> F:
    """Halt with 401 unless the request carries a valid session cookie.

    Meant for controller methods; the controller exposes its ``AuthGate`` as
    ``self.gate``.
    """

    @wraps(f)
    def inner(self: GatedController, *a, **kw):
        claims = self.gate.authenticate(request)
        if claims is None:
            logger.warning(
                f"Auth failed on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise UnauthorizedError()

        g.claims = claims
        g.user_id = claims.id
        logger.debug(f"Auth OK: user={claims.id} {request.method} {request.path}")
        return f(self, *a, **kw)

    return cast(F, inner)


__all__ = ["auth_required", "current_claims"]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import request


def client_ip() -> str:
    """Peer address of the current request.

    Forwarded headers are honoured only through ``ProxyFix`` (see
    ``TRUSTED_PROXIES``), which rewrites ``remote_addr`` before this runs.
    """
    return request.remote_addr or "unknown"


__all__ = ["client_ip"]

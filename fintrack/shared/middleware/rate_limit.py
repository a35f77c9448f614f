# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from threading import Lock

from flask import request

from fintrack.shared.config import load_config
from fintrack.shared.errors import RateLimitedError
from fintrack.shared.logging import logger
from fintrack.shared.middleware.client_ip import client_ip


@dataclass
class Bucket:
    timestamps: deque[float]


class InMemoryRateLimiter:
    def __init__(
        self,
        limit: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._lock = Lock()
        self._buckets: dict[str, Bucket] = {}
        self._last_sweep = clock()

    def _prune(self, bucket: Bucket, now: float) -> None:
        while bucket.timestamps and (now - bucket.timestamps[0]) > self._window:
            bucket.timestamps.popleft()

    def _sweep(self, now: float) -> None:
        # At most once per window; drops buckets whose hits have all expired.
        if now - self._last_sweep <= self._window:
            return
        self._last_sweep = now
        for key in list(self._buckets):
            bucket = self._buckets[key]
            self._prune(bucket, now)
            if not bucket.timestamps:
                del self._buckets[key]

    def allow(self, key: str) -> bool:
        with self._lock:
            now = self._clock()
            self._sweep(now)
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = self._buckets[key] = Bucket(deque(maxlen=self._limit))
            self._prune(bucket, now)
            if len(bucket.timestamps) >= self._limit:
                return False
            bucket.timestamps.append(now)
            return True

    def retry_after(self, key: str) -> float:
        with self._lock:
            bucket = self._buckets.get(key)
            if not bucket or not bucket.timestamps:
                return 0.0
            return max(0.0, self._window - (self._clock() - bucket.timestamps[0]))

    def __len__(self) -> int:
        with self._lock:
            return len(self._buckets)


def rate_limit(limit: int | None = None, window_seconds: float | None = None):
    config = load_config()
    enabled = config.security.enable_rate_limit
    limiter = InMemoryRateLimiter(
        limit or config.security.rate_limit_requests,
        window_seconds or config.security.rate_limit_window,
    )

    def decorator(f: Callable):
        if not enabled:
            return f

        @wraps(f)
        def wrapper(*args, **kwargs):
            key = f"{request.path}:{client_ip()}"
            if not limiter.allow(key):
                logger.warning(f"rate_limit: rejected {request.method} {request.path}")
                raise RateLimitedError(retry_after=limiter.retry_after(key))
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
import time
from collections import defaultdict, deque
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps

from flask import Flask, Request, current_app, jsonify, request

from roomgate.shared.config import AppConfig
from roomgate.shared.logging import logger

_EXTENSION_KEY = "roomgate.rate_limiter"


@dataclass
class Bucket:
    timestamps: deque[float]


class InMemoryRateLimiter:
    def __init__(self, limit: int, window_seconds: float) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._buckets: dict[str, Bucket] = defaultdict(lambda: Bucket(deque(maxlen=self._limit)))
        self._lock = threading.Lock()

    def allow(self, key: str) -> bool:
        now = time.monotonic()
        with self._lock:
            bucket = self._buckets[key]
            # Drop old
            while bucket.timestamps and (now - bucket.timestamps[0]) > self._window:
                bucket.timestamps.popleft()
            if len(bucket.timestamps) >= self._limit:
                return False
            bucket.timestamps.append(now)
            return True


def _client_key(req: Request) -> str:
    forwarded = req.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return forwarded or (req.remote_addr or "unknown")


def configure_rate_limit(app: Flask, config: AppConfig) -> None:
    security = config.security
    if not security.enable_rate_limit:
        app.extensions[_EXTENSION_KEY] = None
        return
    app.extensions[_EXTENSION_KEY] = InMemoryRateLimiter(
        security.rate_limit_requests,
        security.rate_limit_window,
    )


def rate_limit(f: Callable):
    """Limit a view per path and client address using the app's limiter."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        limiter: InMemoryRateLimiter | None = current_app.extensions.get(_EXTENSION_KEY)
        if limiter is not None:
            key = f"{request.path}:{_client_key(request)}"
            if not limiter.allow(key):
                logger.warning(f"rate_limit: blocked {key}")
                return jsonify({"error": "rate_limited"}), 429
        return f(*args, **kwargs)

    return wrapper


__all__ = ["InMemoryRateLimiter", "configure_rate_limit", "rate_limit"]

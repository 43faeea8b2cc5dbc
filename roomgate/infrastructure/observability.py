# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from prometheus_client import Counter, Histogram

from roomgate.domain import ValidationReason

REQUEST_LATENCY = Histogram(
    "roomgate_request_latency_seconds",
    "Request latency",
    labelnames=("endpoint",),
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1),
)
REQUEST_COUNTER = Counter(
    "roomgate_requests_total",
    "Number of processed requests",
    labelnames=("endpoint", "status"),
)
CODES_GENERATED = Counter(
    "roomgate_codes_generated_total",
    "Access codes generated",
)
CODE_VALIDATIONS = Counter(
    "roomgate_code_validations_total",
    "Access code validations by outcome",
    labelnames=("outcome",),
)


class PrometheusCodeMetrics:
    def __init__(self, *, enabled: bool = True) -> None:
        self._enabled = enabled

    def code_generated(self) -> None:
        if self._enabled:
            CODES_GENERATED.inc()

    def code_validated(self, reason: ValidationReason | None) -> None:
        if self._enabled:
            CODE_VALIDATIONS.labels(outcome=str(reason) if reason else "valid").inc()


def observe_request(endpoint: str, status: int, duration: float) -> None:
    REQUEST_LATENCY.labels(endpoint=endpoint).observe(duration)
    REQUEST_COUNTER.labels(endpoint=endpoint, status=str(status)).inc()


__all__ = [
    "CODES_GENERATED",
    "CODE_VALIDATIONS",
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "PrometheusCodeMetrics",
    "observe_request",
]

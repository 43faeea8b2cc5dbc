# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from roomgate.application.interfaces import Clock, CodeMetrics
from roomgate.domain import CodeResolver, ValidationResult
from roomgate.domain.access_codes import isoformat_z
from roomgate.shared.logging import logger


class ValidateCodeUseCase:
    def __init__(self, *, resolver: CodeResolver, clock: Clock, metrics: CodeMetrics) -> None:
        self._resolver = resolver
        self._clock = clock
        self._metrics = metrics

    def execute(self, code: str, client_name: str = "") -> ValidationResult:
        now = self._clock()
        result = self._resolver.validate(code, client_name, now)
        self._metrics.code_validated(result.reason)

        if result.valid and result.meeting_start is not None:
            logger.info(f"codes.validate: ok meeting={isoformat_z(result.meeting_start)}")
        else:
            logger.info(f"codes.validate: rejected reason={result.reason}")
        return result

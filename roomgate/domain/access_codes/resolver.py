# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Recover a meeting from its access code without any stored state."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

from roomgate.domain.exceptions import InvalidCodeFormatError

from .entities import (
    TIME_DIGITS_MODULUS,
    AccessCode,
    ValidationReason,
    ValidationResult,
)
from .generator import CodeGenerator
from .timestamps import epoch_minutes, from_epoch_minutes, to_utc


class CodeResolver:
    """Decode-then-verify validator.

    The trailing four digits pin the meeting minute modulo 10000. Every minute
    in ``[now - lookback, now + lookahead]`` with that residue is regenerated
    and compared against the full code; the first exact match whose window
    contains ``now`` wins.
    """

    def __init__(self, generator: CodeGenerator) -> None:
        self._generator = generator

    def candidates(self, time_digits: int, now: datetime) -> Iterator[datetime]:
        """Yield candidate meeting starts, nearest future offset first."""
        policy = self._generator.policy
        current = epoch_minutes(now)
        newest = current + policy.lookahead_minutes
        oldest = current - policy.lookback_minutes

        minute = newest - (newest - time_digits) % TIME_DIGITS_MODULUS
        while minute >= oldest:
            yield from_epoch_minutes(minute)
            minute -= TIME_DIGITS_MODULUS

    def validate(self, code: str, label: str, now: datetime) -> ValidationResult:
        try:
            parsed = AccessCode.parse(code)
        except InvalidCodeFormatError:
            return ValidationResult.rejected(ValidationReason.INVALID_FORMAT)

        now = to_utc(now)
        matched_outside = False
        for candidate in self.candidates(parsed.time_digits, now):
            generated = self._generator.generate(label, candidate)
            if generated.code != parsed:
                continue
            if generated.window.contains(now):
                return ValidationResult.accepted(generated.window)
            matched_outside = True

        if matched_outside:
            return ValidationResult.rejected(ValidationReason.OUTSIDE_WINDOW)
        return ValidationResult.rejected(ValidationReason.CODE_MISMATCH)


__all__ = ["CodeResolver"]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Value objects of the access-code scheme."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum

from roomgate.domain.exceptions import InvalidCodeFormatError, InvariantViolation

from .timestamps import to_utc, truncate_to_minute

CODE_LENGTH = 8
FIELD_WIDTH = 4
TIME_DIGITS_MODULUS = 10_000
BASE_DIGITS_MIN = 1000
BASE_DIGITS_SPAN = 9000

WINDOW_LEAD = timedelta(minutes=3)
WINDOW_TAIL = timedelta(hours=2)

DEFAULT_LOOKBACK_MINUTES = 7 * 24 * 60
DEFAULT_LOOKAHEAD_MINUTES = 24 * 60


@dataclass(slots=True, frozen=True)
class CodePolicy:
    """Immutable derivation settings shared by the generator and the resolver."""

    secret: str
    bind_label: bool = False
    lookback_minutes: int = DEFAULT_LOOKBACK_MINUTES
    lookahead_minutes: int = DEFAULT_LOOKAHEAD_MINUTES

    def __post_init__(self) -> None:
        if self.lookback_minutes < 0:
            raise InvariantViolation("lookback must be >= 0", field="lookback_minutes")
        if self.lookahead_minutes < 0:
            raise InvariantViolation("lookahead must be >= 0", field="lookahead_minutes")


@dataclass(slots=True, frozen=True)
class ValidityWindow:
    """Inclusive interval during which a meeting's code is accepted."""

    meeting_start: datetime
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if not self.start < self.meeting_start < self.end:
            raise InvariantViolation("window must surround the meeting start", field="start")

    @classmethod
    def around(cls, meeting_start: datetime) -> ValidityWindow:
        meeting_start = truncate_to_minute(meeting_start)
        return cls(
            meeting_start=meeting_start,
            start=meeting_start - WINDOW_LEAD,
            end=meeting_start + WINDOW_TAIL,
        )

    def contains(self, moment: datetime) -> bool:
        return self.start <= to_utc(moment) <= self.end


@dataclass(slots=True, frozen=True)
class AccessCode:
    base_digits: int
    time_digits: int

    def __post_init__(self) -> None:
        if not 0 <= self.base_digits < TIME_DIGITS_MODULUS:
            raise InvariantViolation("base digits out of range", field="base_digits")
        if not 0 <= self.time_digits < TIME_DIGITS_MODULUS:
            raise InvariantViolation("time digits out of range", field="time_digits")

    @classmethod
    def parse(cls, raw: str) -> AccessCode:
        # str.isdigit() also accepts non-ASCII digits such as "٣"
        if len(raw) != CODE_LENGTH or not (raw.isascii() and raw.isdigit()):
            raise InvalidCodeFormatError(raw)
        return cls(base_digits=int(raw[:FIELD_WIDTH]), time_digits=int(raw[FIELD_WIDTH:]))

    @property
    def value(self) -> str:
        return f"{self.base_digits:0{FIELD_WIDTH}d}{self.time_digits:0{FIELD_WIDTH}d}"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class GeneratedCode:
    code: AccessCode
    window: ValidityWindow

    @property
    def encoded_timestamp(self) -> str:
        return f"{self.code.time_digits:0{FIELD_WIDTH}d}"


class ValidationReason(StrEnum):
    INVALID_FORMAT = "invalid_format"
    OUTSIDE_WINDOW = "outside_window"
    CODE_MISMATCH = "code_mismatch"


@dataclass(slots=True, frozen=True)
class ValidationResult:
    valid: bool
    meeting_start: datetime | None = None
    window_end: datetime | None = None
    reason: ValidationReason | None = None

    @classmethod
    def accepted(cls, window: ValidityWindow) -> ValidationResult:
        return cls(valid=True, meeting_start=window.meeting_start, window_end=window.end)

    @classmethod
    def rejected(cls, reason: ValidationReason) -> ValidationResult:
        return cls(valid=False, reason=reason)


__all__ = [
    "AccessCode",
    "CODE_LENGTH",
    "CodePolicy",
    "GeneratedCode",
    "TIME_DIGITS_MODULUS",
    "ValidationReason",
    "ValidationResult",
    "ValidityWindow",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations


class DomainError(Exception):
    pass


class InvariantViolationError(DomainError):
    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {super().__str__()}"
        return super().__str__()


class InvalidCodeFormatError(DomainError):
    """Raised when a raw access code is not exactly eight ASCII digits."""


InvariantViolation = InvariantViolationError


class MeetingTimeError(DomainError):
    """Raised for a meeting time that cannot be parsed or cannot carry a window."""

    def __init__(self, raw: object):
        super().__init__(f"invalid meeting time: {raw!r}")
        self.raw = raw

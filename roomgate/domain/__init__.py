# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .access_codes import (
    AccessCode,
    CodeGenerator,
    CodePolicy,
    CodeResolver,
    GeneratedCode,
    ValidationReason,
    ValidationResult,
    ValidityWindow,
)
from .exceptions import (
    DomainError,
    InvalidCodeFormatError,
    InvariantViolation,
    MeetingTimeError,
)

__all__ = [
    "AccessCode",
    "CodeGenerator",
    "CodePolicy",
    "CodeResolver",
    "GeneratedCode",
    "ValidationReason",
    "ValidationResult",
    "ValidityWindow",
    "DomainError",
    "InvalidCodeFormatError",
    "InvariantViolation",
    "MeetingTimeError",
]

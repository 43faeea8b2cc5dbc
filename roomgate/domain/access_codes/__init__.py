# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import (
    AccessCode,
    CodePolicy,
    GeneratedCode,
    ValidationReason,
    ValidationResult,
    ValidityWindow,
)
from .generator import CodeGenerator, normalize_label, rolling_hash
from .resolver import CodeResolver
from .timestamps import isoformat_z, parse_meeting_time

__all__ = [
    "AccessCode",
    "CodeGenerator",
    "CodePolicy",
    "CodeResolver",
    "GeneratedCode",
    "ValidationReason",
    "ValidationResult",
    "ValidityWindow",
    "isoformat_z",
    "normalize_label",
    "parse_meeting_time",
    "rolling_hash",
]

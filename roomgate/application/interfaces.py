# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Protocol

from roomgate.domain import ValidationReason


class Clock(Protocol):
    def __call__(self) -> datetime: ...


class TokenSigner(Protocol):
    def sign(self, claims: Mapping[str, Any]) -> str: ...


class CodeMetrics(Protocol):
    def code_generated(self) -> None: ...

    def code_validated(self, reason: ValidationReason | None) -> None: ...

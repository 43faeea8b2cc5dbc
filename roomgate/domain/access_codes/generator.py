# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Deterministic derivation of meeting access codes.

A code is ``BBBBTTTT``: ``BBBB`` is a 31-multiplier rolling hash of the
derivation seed folded into 1000..9999 and ``TTTT`` is the meeting's
minute-since-epoch modulo 10000. The hash is a checksum, not a MAC; the
narrow validity window is what limits forgery.
"""

from __future__ import annotations

import re
from datetime import datetime

from roomgate.domain.exceptions import MeetingTimeError

from .entities import (
    BASE_DIGITS_MIN,
    BASE_DIGITS_SPAN,
    TIME_DIGITS_MODULUS,
    AccessCode,
    CodePolicy,
    GeneratedCode,
    ValidityWindow,
)
from .timestamps import epoch_minutes, format_seed_time, truncate_to_minute

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def rolling_hash(seed: str) -> int:
    """Return the signed 32-bit ``h = h * 31 + unit`` hash over UTF-16 code units."""
    value = 0
    data = seed.encode("utf-16-le")
    for offset in range(0, len(data), 2):
        unit = data[offset] | (data[offset + 1] << 8)
        value = (value * 31 + unit) & _INT32_MASK
    if value & _INT32_SIGN:
        value -= 1 << 32
    return value


def normalize_label(label: str) -> str:
    return _NON_ALNUM.sub("", label.lower())


class CodeGenerator:
    def __init__(self, policy: CodePolicy) -> None:
        self._policy = policy

    @property
    def policy(self) -> CodePolicy:
        return self._policy

    def seed_for(self, meeting_time: datetime, label: str = "") -> str:
        parts = [format_seed_time(meeting_time)]
        if self._policy.bind_label:
            parts.append(normalize_label(label))
        parts.append(self._policy.secret)
        return "".join(parts)

    def generate(self, label: str, meeting_time: datetime) -> GeneratedCode:
        if not isinstance(meeting_time, datetime):
            raise MeetingTimeError(meeting_time)

        try:
            meeting_start = truncate_to_minute(meeting_time)
            window = ValidityWindow.around(meeting_start)
        except OverflowError as exc:
            # the window edges must stay inside datetime.min..datetime.max
            raise MeetingTimeError(meeting_time) from exc

        digest = rolling_hash(self.seed_for(meeting_start, label or ""))
        code = AccessCode(
            base_digits=abs(digest) % BASE_DIGITS_SPAN + BASE_DIGITS_MIN,
            time_digits=epoch_minutes(meeting_start) % TIME_DIGITS_MODULUS,
        )
        return GeneratedCode(code=code, window=window)


__all__ = ["CodeGenerator", "normalize_label", "rolling_hash"]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Minute-resolution UTC helpers shared by the generator and the resolver."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from roomgate.domain.exceptions import MeetingTimeError

SEED_TIME_FORMAT = "%Y-%m-%dT%H:%M"

# Browser locale renderings accepted besides ISO-8601.
_LOCALE_FORMATS = (
    "%m/%d/%Y, %I:%M:%S %p",
    "%m/%d/%Y, %I:%M %p",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%d.%m.%Y, %H:%M:%S",
    "%d.%m.%Y %H:%M",
    "%B %d, %Y %I:%M %p",
    "%B %d, %Y %H:%M",
)

_DATETIME_ADAPTER = TypeAdapter(datetime)


def to_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def truncate_to_minute(moment: datetime) -> datetime:
    return to_utc(moment).replace(second=0, microsecond=0)


def epoch_minutes(moment: datetime) -> int:
    return int(to_utc(moment).timestamp() // 60)


def from_epoch_minutes(minutes: int) -> datetime:
    return datetime.fromtimestamp(minutes * 60, tz=UTC)


def format_seed_time(moment: datetime) -> str:
    return truncate_to_minute(moment).strftime(SEED_TIME_FORMAT)


def isoformat_z(moment: datetime) -> str:
    return to_utc(moment).isoformat().replace("+00:00", "Z")


def _parse_naive_or_aware(value: str) -> datetime | None:
    try:
        return _DATETIME_ADAPTER.validate_python(value)
    except PydanticValidationError:
        pass

    for fmt in _LOCALE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def parse_meeting_time(raw: str) -> datetime:
    """Parse a client supplied meeting time into an aware UTC datetime.

    ISO-8601 (with or without offset) is tried first, then a handful of
    browser locale renderings. Values without an offset are taken as UTC.
    Pydantic's lax datetime parsing also lets through Unix-second strings
    and date-only values (midnight UTC).
    """
    value = raw.strip()
    moment = _parse_naive_or_aware(value) if value else None
    if moment is None:
        raise MeetingTimeError(raw)

    try:
        return to_utc(moment)
    except OverflowError as exc:
        # an offset can push the instant past datetime.min/max
        raise MeetingTimeError(raw) from exc


__all__ = [
    "SEED_TIME_FORMAT",
    "epoch_minutes",
    "format_seed_time",
    "from_epoch_minutes",
    "isoformat_z",
    "parse_meeting_time",
    "to_utc",
    "truncate_to_minute",
]

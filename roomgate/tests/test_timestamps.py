from __future__ import annotations

from datetime import UTC, datetime

import pytest

from roomgate.domain import MeetingTimeError
from roomgate.domain.access_codes.timestamps import (epoch_minutes,
                                                     from_epoch_minutes,
                                                     isoformat_z,
                                                     parse_meeting_time)

from .conftest import MEETING


@pytest.mark.parametrize(
    "raw",
    [
        "2025-01-01T10:00:00Z",
        "2025-01-01T10:00:00.000Z",
        "2025-01-01T12:00:00+02:00",
        "2025-01-01T10:00",
        "2025-01-01 10:00:00",
        "01/01/2025, 10:00:00 AM",
        "1/1/2025 10:00",
    ],
)
def test_parse_meeting_time_accepts_iso_and_locale(raw: str) -> None:
    assert parse_meeting_time(raw) == MEETING


@pytest.mark.parametrize("raw", ["", "   ", "tomorrow", "2025-13-01T10:00", "32/01/2025 10:00"])
def test_parse_meeting_time_rejects_garbage(raw: str) -> None:
    with pytest.raises(MeetingTimeError) as exc_info:
        parse_meeting_time(raw)
    assert exc_info.value.raw == raw


def test_parse_meeting_time_rejects_offset_past_datetime_min() -> None:
    with pytest.raises(MeetingTimeError):
        parse_meeting_time("0001-01-01T00:30:00+05:00")


def test_parse_meeting_time_accepts_lax_pydantic_forms() -> None:
    assert parse_meeting_time("1735725600") == MEETING
    assert parse_meeting_time("2025-01-01") == datetime(2025, 1, 1, tzinfo=UTC)


def test_epoch_minutes_round_trip() -> None:
    assert epoch_minutes(MEETING) == 28_928_760
    assert from_epoch_minutes(28_928_760) == MEETING


def test_epoch_minutes_floors_partial_minutes() -> None:
    assert epoch_minutes(datetime(2025, 1, 1, 10, 0, 59, tzinfo=UTC)) == 28_928_760


def test_isoformat_z_uses_zulu_suffix() -> None:
    assert isoformat_z(MEETING) == "2025-01-01T10:00:00Z"

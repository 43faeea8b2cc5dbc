from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from roomgate.domain import (CodeGenerator, CodePolicy, CodeResolver,
                             GeneratedCode, ValidationReason)

from .conftest import MEETING, MEETING_CODE


class CountingGenerator(CodeGenerator):
    def __init__(self, policy: CodePolicy) -> None:
        super().__init__(policy)
        self.calls: list[datetime] = []

    def generate(self, label: str, meeting_time: datetime) -> GeneratedCode:
        self.calls.append(meeting_time)
        return super().generate(label, meeting_time)


@pytest.fixture()
def generator() -> CountingGenerator:
    return CountingGenerator(CodePolicy(secret="S"))


@pytest.fixture()
def resolver(generator: CountingGenerator) -> CodeResolver:
    return CodeResolver(generator)


def test_scenario_code_is_valid_before_meeting(resolver: CodeResolver) -> None:
    result = resolver.validate(MEETING_CODE, "", datetime(2025, 1, 1, 9, 58, tzinfo=UTC))

    assert result.valid is True
    assert result.meeting_start == MEETING
    assert result.window_end == datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
    assert result.reason is None


def test_scenario_code_expires_after_window(resolver: CodeResolver) -> None:
    result = resolver.validate(MEETING_CODE, "", datetime(2025, 1, 1, 12, 1, tzinfo=UTC))

    assert result.valid is False
    assert result.reason == ValidationReason.OUTSIDE_WINDOW
    assert result.meeting_start is None


@pytest.mark.parametrize(
    ("now", "valid"),
    [
        (MEETING - timedelta(minutes=3), True),
        (MEETING + timedelta(hours=2), True),
        (MEETING - timedelta(minutes=3, seconds=1), False),
        (MEETING + timedelta(hours=2, seconds=1), False),
    ],
)
def test_window_boundaries_are_inclusive(resolver: CodeResolver, now: datetime, valid: bool) -> None:
    result = resolver.validate(MEETING_CODE, "", now)

    assert result.valid is valid
    if not valid:
        assert result.reason == ValidationReason.OUTSIDE_WINDOW


@pytest.mark.parametrize("minutes_after", [-3, 0, 1, 59, 119, 120])
def test_round_trip_inside_window(resolver: CodeResolver, minutes_after: int) -> None:
    meeting = datetime(2025, 3, 14, 15, 9, tzinfo=UTC)
    code = CodeGenerator(CodePolicy(secret="S")).generate("", meeting).code.value

    result = resolver.validate(code, "", meeting + timedelta(minutes=minutes_after))

    assert result.valid is True
    assert result.meeting_start == meeting


@pytest.mark.parametrize("code", ["1234567", "123456789", "abcdefgh", "4501 876", ""])
def test_malformed_code_skips_search(
    resolver: CodeResolver, generator: CountingGenerator, code: str
) -> None:
    result = resolver.validate(code, "", MEETING)

    assert result.valid is False
    assert result.reason == ValidationReason.INVALID_FORMAT
    assert generator.calls == []


def test_wrong_base_digits_report_mismatch() -> None:
    generator = CountingGenerator(CodePolicy(secret="S", lookback_minutes=180, lookahead_minutes=180))
    resolver = CodeResolver(generator)

    result = resolver.validate("45028760", "", MEETING)

    assert result.valid is False
    assert result.reason == ValidationReason.CODE_MISMATCH
    assert generator.calls == [MEETING]


def test_code_from_other_secret_is_rejected(resolver: CodeResolver) -> None:
    foreign = CodeGenerator(CodePolicy(secret="T")).generate("", MEETING).code.value

    result = resolver.validate(foreign, "", MEETING)

    assert result.valid is False
    assert result.reason == ValidationReason.CODE_MISMATCH


def test_collision_across_10000_minutes_is_disambiguated(resolver: CodeResolver) -> None:
    later = MEETING + timedelta(minutes=10_000)
    later_code = "91138760"

    # during the later meeting the earlier code decodes to a candidate with the
    # same trailing digits, but only the earlier meeting regenerates to it
    early_at_later = resolver.validate(MEETING_CODE, "", later + timedelta(minutes=5))
    assert early_at_later.valid is False
    assert early_at_later.reason == ValidationReason.OUTSIDE_WINDOW

    later_at_later = resolver.validate(later_code, "", later + timedelta(minutes=5))
    assert later_at_later.valid is True
    assert later_at_later.meeting_start == later


def test_candidates_are_bounded_and_ordered(generator: CountingGenerator) -> None:
    resolver = CodeResolver(generator)
    now = datetime(2025, 1, 1, 9, 58, tzinfo=UTC)

    candidates = list(resolver.candidates(8760, now))

    assert candidates == [MEETING, MEETING - timedelta(minutes=10_000)]
    assert all(c.second == 0 for c in candidates)


def test_search_stops_at_first_in_window_match(
    resolver: CodeResolver, generator: CountingGenerator
) -> None:
    resolver.validate(MEETING_CODE, "", datetime(2025, 1, 1, 9, 58, tzinfo=UTC))
    assert generator.calls == [MEETING]


def test_out_of_window_match_keeps_searching(
    resolver: CodeResolver, generator: CountingGenerator
) -> None:
    now = datetime(2025, 1, 1, 6, 0, tzinfo=UTC)

    resolver.validate(MEETING_CODE, "", now)

    assert generator.calls == [MEETING, MEETING - timedelta(minutes=10_000)]


def test_code_outside_lookback_is_not_found() -> None:
    resolver = CodeResolver(CodeGenerator(CodePolicy(secret="S", lookback_minutes=60)))

    result = resolver.validate(MEETING_CODE, "", MEETING + timedelta(minutes=90))

    assert result.valid is False
    assert result.reason == ValidationReason.CODE_MISMATCH


def test_future_meeting_reports_outside_window(resolver: CodeResolver) -> None:
    result = resolver.validate(MEETING_CODE, "", MEETING - timedelta(hours=5))

    assert result.valid is False
    assert result.reason == ValidationReason.OUTSIDE_WINDOW


def test_naive_now_is_treated_as_utc(resolver: CodeResolver) -> None:
    result = resolver.validate(MEETING_CODE, "", datetime(2025, 1, 1, 10, 30))
    assert result.valid is True


def test_label_binding_requires_matching_label() -> None:
    resolver = CodeResolver(CodeGenerator(CodePolicy(secret="S", bind_label=True)))
    now = MEETING + timedelta(minutes=10)

    assert resolver.validate("59138760", "ACME corp", now).valid is True

    wrong = resolver.validate("59138760", "Globex", now)
    assert wrong.valid is False
    assert wrong.reason == ValidationReason.CODE_MISMATCH

    missing = resolver.validate("59138760", "", now)
    assert missing.valid is False

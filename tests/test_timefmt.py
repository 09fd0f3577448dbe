from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from footballbin_mcp.timefmt import (
    format_countdown,
    format_match_date,
    get_match_status,
    parse_kickoff,
)

KICKOFF = datetime(2025, 9, 13, 14, 0, tzinfo=timezone.utc)


class TestParseKickoff:
    def test_zulu_suffix(self):
        assert parse_kickoff("2025-09-13T14:00:00Z") == KICKOFF

    def test_naive_is_utc(self):
        assert parse_kickoff("2025-09-13T14:00:00") == KICKOFF

    def test_datetime_passthrough(self):
        assert parse_kickoff(KICKOFF) is KICKOFF


class TestFormatMatchDate:
    def test_pinned_utc(self):
        assert format_match_date(KICKOFF, timezone.utc) == "Sat 13 Sep 14:00"

    def test_pinned_zone_shifts_calendar(self):
        late = datetime(2025, 9, 13, 23, 30, tzinfo=timezone.utc)
        assert format_match_date(late, ZoneInfo("Europe/Berlin")) == "Sun 14 Sep 01:30"

    def test_zero_padded_hours(self):
        early = datetime(2025, 1, 6, 7, 5, tzinfo=timezone.utc)
        assert format_match_date(early, timezone.utc) == "Mon 6 Jan 07:05"


class TestFormatCountdown:
    def test_now_at_kickoff(self):
        assert format_countdown(KICKOFF, KICKOFF) == "now"

    def test_now_after_kickoff(self):
        assert format_countdown(KICKOFF, KICKOFF + timedelta(minutes=30)) == "now"

    def test_days_and_hours(self):
        assert format_countdown(KICKOFF, KICKOFF - timedelta(days=2, hours=5, minutes=10)) == "2d 5h"

    def test_hours_and_minutes(self):
        assert format_countdown(KICKOFF, KICKOFF - timedelta(hours=3, minutes=7)) == "3h 7m"

    def test_minutes_only(self):
        assert format_countdown(KICKOFF, KICKOFF - timedelta(minutes=42, seconds=30)) == "42m"

    def test_exactly_one_day(self):
        assert format_countdown(KICKOFF, KICKOFF - timedelta(days=1)) == "1d 0h"


class TestMatchStatus:
    @pytest.mark.parametrize(
        "offset, expected",
        [
            (timedelta(seconds=-1), "scheduled"),
            (timedelta(0), "live"),
            (timedelta(hours=1, minutes=59, seconds=59), "live"),
            (timedelta(hours=2), "finished"),
            (timedelta(days=3), "finished"),
        ],
    )
    def test_boundaries(self, offset, expected):
        assert get_match_status(KICKOFF, KICKOFF + offset) == expected

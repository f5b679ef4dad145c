"""
Exercise Tracker - Coercion Helper Tests
==========================================

What we test:
    ✅ Truncating, prefix-based integer parsing
    ✅ ISO date parsing normalized to UTC, with fallbacks
    ✅ Fixed "Mon Jan 01 2024" rendering
    ✅ JSON scalars cast to form text
"""

from datetime import datetime, timedelta, timezone

import pytest

from exercise_tracker.schemas.common import loose_text
from exercise_tracker.services.coercion import format_date, parse_date, parse_int


class TestParseInt:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("30", 30),
            ("30.9", 30),
            ("  12min", 12),
            ("-5", -5),
            ("+7", 7),
            ("0x1f", 31),
            (45, 45),
            (12.7, 12),
        ],
    )
    def test_leading_integer(self, raw, expected):
        assert parse_int(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "   ", "min30", None, True, float("nan")])
    def test_not_a_number(self, raw):
        assert parse_int(raw) is None


class TestParseDate:

    def test_bare_date_is_utc_midnight(self):
        assert parse_date("2024-01-01") == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_naive_datetime_is_taken_as_utc(self):
        parsed = parse_date("2024-01-01T10:30:00")
        assert parsed == datetime(2024, 1, 1, 10, 30, tzinfo=timezone.utc)

    def test_offset_is_converted_to_utc(self):
        parsed = parse_date("2024-01-01T10:30:00+02:00")
        assert parsed == datetime(2024, 1, 1, 8, 30, tzinfo=timezone.utc)
        assert parsed.utcoffset() == timedelta(0)

    def test_zulu_suffix(self):
        assert parse_date("2024-03-05T00:00:00Z") == datetime(2024, 3, 5, tzinfo=timezone.utc)

    def test_rendered_form_parses_back(self):
        assert parse_date("Mon Jan 01 2024") == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_long_month_name(self):
        assert parse_date("January 15, 2024") == datetime(2024, 1, 15, tzinfo=timezone.utc)

    @pytest.mark.parametrize("raw", ["", "   ", None, "not a date", "2024-13-45"])
    def test_invalid_is_none(self, raw):
        assert parse_date(raw) is None

    @pytest.mark.parametrize(
        "raw", ["9999-12-31T23:00:00-05:00", "0001-01-01T01:00:00+05:00"]
    )
    def test_out_of_range_after_utc_shift_is_none(self, raw):
        assert parse_date(raw) is None


class TestFormatDate:

    def test_day_month_day_year(self):
        assert format_date(datetime(2024, 1, 1, tzinfo=timezone.utc)) == "Mon Jan 01 2024"

    def test_time_of_day_is_dropped(self):
        value = datetime(2023, 12, 25, 23, 59, tzinfo=timezone.utc)
        assert format_date(value) == "Mon Dec 25 2023"

    def test_naive_values_are_treated_as_utc(self):
        assert format_date(datetime(2024, 2, 29, 12, 0)) == "Thu Feb 29 2024"


class TestLooseText:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("run", "run"),
            (123, "123"),
            (2.0, "2"),
            (12.5, "12.5"),
            (True, "true"),
            (None, None),
            ({"a": 1}, None),
            ([1, 2], None),
        ],
    )
    def test_json_values_as_form_text(self, raw, expected):
        assert loose_text(raw) == expected

"""Tests for ICU-style date pattern parsing."""
from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from typedecode.conversions.date_patterns import parse_date_pattern, to_strptime


class TestToStrptime:
    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("yyyy-MM-dd", "%Y-%m-%d"),
            ("yy/M/d", "%y/%m/%d"),
            ("EEEE, MMMM d", "%A, %B %d"),
            ("EEE MMM d", "%a %b %d"),
            ("hh:mm a", "%I:%M %p"),
            ("HH:mm:ss.SSS", "%H:%M:%S.%f"),
            ("yyyy-MM-dd'T'HH:mm:ssZ", "%Y-%m-%dT%H:%M:%S%z"),
            ("D", "%j"),
        ],
    )
    def test_fields(self, pattern, expected):
        assert to_strptime(pattern) == expected

    def test_escaped_quote(self):
        assert to_strptime("h 'o''clock'") == "%I o'clock"
        assert to_strptime("''") == "'"

    def test_percent_is_escaped(self):
        assert to_strptime("d%") == "%d%%"
        assert to_strptime("'100%'") == "100%%"

    def test_unsupported_field(self):
        with pytest.raises(ValueError, match="Unsupported field 'GG'"):
            to_strptime("GG yyyy")

    def test_unterminated_quote(self):
        with pytest.raises(ValueError, match="Unterminated quote"):
            to_strptime("yyyy 'at")

    @pytest.mark.parametrize("pattern", ["yyyy-MM-dd kk:mm", "KK:mm a"])
    def test_one_based_and_zero_based_hours_unsupported(self, pattern):
        with pytest.raises(ValueError, match="Unsupported field"):
            to_strptime(pattern)


class TestParseDatePattern:
    def test_date_and_time(self):
        assert parse_date_pattern("2020-01-31 13:45", "yyyy-MM-dd HH:mm") == datetime(
            2020, 1, 31, 13, 45
        )

    def test_twelve_hour_clock(self):
        assert parse_date_pattern("01:30 PM", "hh:mm a").hour == 13

    def test_fraction_of_second(self):
        assert parse_date_pattern("05.123", "ss.SSS").microsecond == 123000

    def test_offset(self):
        result = parse_date_pattern("2020-01-01 00:00 +0200", "yyyy-MM-dd HH:mm Z")
        assert result.utcoffset() == timedelta(hours=2)

    def test_mismatch(self):
        with pytest.raises(ValueError):
            parse_date_pattern("2020/01/31", "yyyy-MM-dd")

"""
Tests for duration parsing and formatting.
"""

import pytest
from sideorder.utils.durations import format_duration, parse_duration


class TestParseDuration:
    """Test accepted duration notations."""

    def test_numbers(self):
        assert parse_duration(245) == 245.0
        assert parse_duration(3.5) == 3.5

    def test_numeric_string(self):
        assert parse_duration("245.5") == 245.5

    def test_minutes_seconds(self):
        assert parse_duration("4:05") == 245.0
        assert parse_duration("22:00") == 1320.0

    def test_hours_minutes_seconds(self):
        assert parse_duration("1:02:03") == 3723.0

    @pytest.mark.parametrize("value", ["", "4:", ":30", "4:60", "1:2:3:4", "-1", "-0:30", "0:-30", "nan", "four", True])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_duration(value)

    def test_negative_number(self):
        with pytest.raises(ValueError):
            parse_duration(-3)


class TestFormatDuration:
    """Test m:ss formatting."""

    def test_format(self):
        assert format_duration(245) == "4:05"
        assert format_duration(1320) == "22:00"
        assert format_duration(59.6) == "1:00"
        assert format_duration(0) == "0:00"

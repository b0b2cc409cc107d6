"""Tests for date, hours and working day parsers."""

import pytest
from datetime import date
from decimal import Decimal
from timekeep.utils.date_parser import parse_date
from timekeep.utils.hours_parser import parse_hours
from timekeep.utils.weekday_parser import parse_working_days

TODAY = date(2024, 1, 10)  # Wednesday


class TestParseDate:
    def test_absolute(self):
        assert parse_date("2024-01-15") == date(2024, 1, 15)
        assert parse_date("January 15, 2024") == date(2024, 1, 15)

    def test_relative_days(self):
        assert parse_date("today", today=TODAY) == TODAY
        assert parse_date("yesterday", today=TODAY) == date(2024, 1, 9)
        assert parse_date("Tomorrow", today=TODAY) == date(2024, 1, 11)

    def test_in_n_units(self):
        assert parse_date("in 3 days", today=TODAY) == date(2024, 1, 13)
        assert parse_date("in 2 weeks", today=TODAY) == date(2024, 1, 24)
        assert parse_date("in 1 month", today=TODAY) == date(2024, 2, 10)

    def test_periods(self):
        assert parse_date("last month", today=TODAY) == date(2023, 12, 1)
        assert parse_date("this month", today=TODAY) == date(2024, 1, 1)
        assert parse_date("next month", today=TODAY) == date(2024, 2, 1)
        assert parse_date("next year", today=TODAY) == date(2025, 1, 1)
        assert parse_date("this week", today=TODAY) == date(2024, 1, 8)
        assert parse_date("next week", today=TODAY) == date(2024, 1, 15)
        assert parse_date("last week", today=TODAY) == date(2024, 1, 1)

    def test_weekdays(self):
        assert parse_date("next friday", today=TODAY) == date(2024, 1, 12)
        assert parse_date("next wednesday", today=TODAY) == date(2024, 1, 17)
        assert parse_date("last monday", today=TODAY) == date(2024, 1, 8)

    def test_invalid(self):
        with pytest.raises(ValueError, match="Could not parse date"):
            parse_date("someday", today=TODAY)


class TestParseHours:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("8", Decimal("8")),
            ("7.5", Decimal("7.5")),
            ("7,5", Decimal("7.5")),
            ("7.5h", Decimal("7.5")),
            ("7h 30m", Decimal("7.5")),
            ("45m", Decimal("0.75")),
            ("90min", Decimal("1.5")),
        ],
    )
    def test_formats(self, text, expected):
        assert parse_hours(text) == expected

    def test_negative(self):
        with pytest.raises(ValueError, match="negative"):
            parse_hours("-2")

    def test_garbage(self):
        with pytest.raises(ValueError):
            parse_hours("lots")

    @pytest.mark.parametrize("text", ["nan", "NaN", "inf", "-Infinity", "Infinity"])
    def test_non_finite(self, text):
        with pytest.raises(ValueError, match="finite"):
            parse_hours(text)

    def test_empty(self):
        with pytest.raises(ValueError, match="Empty"):
            parse_hours("  ")


class TestParseWorkingDays:
    def test_range(self):
        assert parse_working_days("mon-fri") == frozenset({1, 2, 3, 4, 5})

    def test_wrapping_range(self):
        assert parse_working_days("sat-mon") == frozenset({6, 0, 1})

    def test_list_of_names(self):
        assert parse_working_days("Monday, Wednesday, Friday") == frozenset({1, 3, 5})

    def test_indices(self):
        assert parse_working_days("0,6") == frozenset({0, 6})

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            parse_working_days("7")

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown weekday"):
            parse_working_days("mon,xyz")

    @pytest.mark.parametrize("text", ["monkey", "sunshine", "fr", "tuesdays"])
    def test_only_exact_names(self, text):
        with pytest.raises(ValueError, match="Unknown weekday"):
            parse_working_days(text)

    def test_mixed_short_and_full_names(self):
        assert parse_working_days("Sunday-tue, SAT") == frozenset({0, 1, 2, 6})

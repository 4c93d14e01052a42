"""Tests for birth date parsing and validation"""

from datetime import date

import pytest

from fortune_app.config.defaults import DateWindowParams
from fortune_app.data.validators import (
    days_in_month,
    is_leap_year,
    parse_and_validate,
    parse_birth_date,
    validate_birth_date,
)
from fortune_app.errors import InvalidDateError, MalformedDateError, MissingInputError


class TestLeapYears:

    @pytest.mark.parametrize("year,expected", [
        (2000, True),
        (1900, False),
        (2024, True),
        (2023, False),
        (1996, True),
    ])
    def test_is_leap_year(self, year, expected):
        assert is_leap_year(year) is expected

    def test_february_length(self):
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28

    def test_month_lengths(self):
        assert days_in_month(2023, 1) == 31
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31


class TestParseBirthDate:

    def test_parses_fields(self):
        assert parse_birth_date("1990-06-15") == (1990, 6, 15)

    def test_tolerates_whitespace(self):
        assert parse_birth_date(" 1990-06-15 ") == (1990, 6, 15)

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing(self, raw):
        with pytest.raises(MissingInputError):
            parse_birth_date(raw)

    @pytest.mark.parametrize("raw", ["1990/06/15", "1990-06", "abcd-ef-gh", "1990-06-15-01"])
    def test_malformed(self, raw):
        with pytest.raises(MalformedDateError) as exc_info:
            parse_birth_date(raw)
        assert exc_info.value.raw_value == raw


class TestValidateBirthDate:

    def test_valid_date(self):
        assert validate_birth_date(1990, 6, 15) == date(1990, 6, 15)

    def test_leap_day(self):
        assert validate_birth_date(2000, 2, 29) == date(2000, 2, 29)

    def test_non_leap_february_29(self):
        with pytest.raises(InvalidDateError) as exc_info:
            validate_birth_date(2023, 2, 29)
        assert exc_info.value.max_day == 28
        assert "28 days" in str(exc_info.value)

    def test_century_non_leap(self):
        with pytest.raises(InvalidDateError):
            validate_birth_date(1900, 2, 29)

    @pytest.mark.parametrize("year", [1899, 2027])
    def test_year_window(self, year):
        with pytest.raises(InvalidDateError) as exc_info:
            validate_birth_date(year, 1, 1)
        assert exc_info.value.year == year
        assert "1900" in str(exc_info.value)

    @pytest.mark.parametrize("month", [0, 13])
    def test_month_range(self, month):
        with pytest.raises(InvalidDateError):
            validate_birth_date(2000, month, 1)

    @pytest.mark.parametrize("day", [0, 32])
    def test_day_range(self, day):
        with pytest.raises(InvalidDateError):
            validate_birth_date(2000, 1, day)

    def test_thirty_day_month(self):
        with pytest.raises(InvalidDateError):
            validate_birth_date(2000, 4, 31)

    def test_custom_window(self):
        window = DateWindowParams(min_year=2000, max_year=2010)
        with pytest.raises(InvalidDateError):
            validate_birth_date(1999, 1, 1, window)
        assert validate_birth_date(2010, 1, 1, window) == date(2010, 1, 1)

    def test_window_bounds_inclusive(self):
        assert validate_birth_date(1900, 1, 1) == date(1900, 1, 1)
        assert validate_birth_date(2026, 12, 31) == date(2026, 12, 31)


class TestParseAndValidate:

    def test_round_trip(self):
        assert parse_and_validate("2024-02-29") == date(2024, 2, 29)

    def test_invalid(self):
        with pytest.raises(InvalidDateError):
            parse_and_validate("2024-02-30")

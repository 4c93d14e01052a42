"""
Birth date parsing and validation.

Dates are checked against the accepted year window, the month range and
the real length of the month, leap years included, before any calendar
lookup or synthesis runs.
"""

from datetime import date
from typing import Optional

from ..config.defaults import DateWindowParams
from ..errors import InvalidDateError, MalformedDateError, MissingInputError

DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month, February 29 in leap years."""
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def parse_birth_date(raw_value: Optional[str]) -> tuple[int, int, int]:
    """
    Split a YYYY-MM-DD string into integer fields.

    Fields are parsed by hand so no timezone or locale is involved.

    Args:
        raw_value: Birth date text as entered

    Returns:
        (year, month, day) integers, not yet range-checked

    Raises:
        MissingInputError: If no date was given
        MalformedDateError: If the text is not three integer fields
    """
    if raw_value is None or not raw_value.strip():
        raise MissingInputError()

    parts = raw_value.strip().split("-")
    if len(parts) != 3:
        raise MalformedDateError(
            f"Invalid date format: {raw_value!r}",
            raw_value=raw_value
        )

    try:
        year, month, day = (int(part) for part in parts)
    except ValueError:
        raise MalformedDateError(
            f"Invalid date format: {raw_value!r}",
            raw_value=raw_value
        ) from None

    return year, month, day


def validate_birth_date(year: int, month: int, day: int,
                        window: Optional[DateWindowParams] = None) -> date:
    """
    Validate date fields and build the date.

    Args:
        year: Gregorian year
        month: Month, 1-12
        day: Day of month
        window: Accepted year window, defaults to 1900-2026

    Returns:
        The validated date

    Raises:
        InvalidDateError: If any field is out of range
    """
    window = window or DateWindowParams()

    if year < window.min_year or year > window.max_year:
        raise InvalidDateError(
            f"Please enter a 4-digit year between {window.min_year} and {window.max_year}.",
            year=year, month=month, day=day
        )

    if month < 1 or month > 12:
        raise InvalidDateError(
            "Please enter a month between 1 and 12.",
            year=year, month=month, day=day
        )

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDateError(
            f"{year}-{month:02d} only has {max_day} days, please enter a valid date.",
            year=year, month=month, day=day, max_day=max_day
        )

    return date(year, month, day)


def parse_and_validate(raw_value: Optional[str],
                       window: Optional[DateWindowParams] = None) -> date:
    """Parse and validate a YYYY-MM-DD birth date in one step."""
    return validate_birth_date(*parse_birth_date(raw_value), window=window)

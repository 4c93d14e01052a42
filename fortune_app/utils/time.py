"""
Month arithmetic and period timestamp helpers.

The synthesizer walks whole months and derives its trend term from each
month's first-day timestamp, so every helper here works on the first day
of a month in UTC.
"""

from datetime import UTC, date, datetime

MS_PER_DAY = 1000 * 60 * 60 * 24
MS_PER_YEAR = MS_PER_DAY * 365


def month_start_ms(year: int, month: int) -> int:
    """
    UTC epoch milliseconds of the first day of a month.

    Args:
        year: Calendar year
        month: Calendar month, 1-12

    Returns:
        Milliseconds since the Unix epoch at 00:00 UTC on day 1
    """
    return int(datetime(year, month, 1, tzinfo=UTC).timestamp() * 1000)


def months_between(start: tuple[int, int], end: tuple[int, int]) -> int:
    """
    Signed number of whole months from start to end.

    Args:
        start: (year, month) of the first month
        end: (year, month) of the last month

    Returns:
        Month offset, negative when end precedes start
    """
    return (end[0] - start[0]) * 12 + (end[1] - start[1])


def add_months(year: int, month: int, offset: int) -> tuple[int, int]:
    """Shift a (year, month) pair by a whole number of months."""
    zero_based = month - 1 + offset
    return year + zero_based // 12, zero_based % 12 + 1


def format_month(year: int, month: int) -> str:
    """Format a month as a YYYY-MM label."""
    return f"{year:04d}-{month:02d}"


def format_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.isoformat()

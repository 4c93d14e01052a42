"""
Input error classifications for birth date handling.

These exceptions describe user input that cannot start a generation
request. Their messages are meant to be shown to the user as-is.
"""

from typing import Optional, Dict, Any


class InputError(Exception):
    """Base class for user input problems that are reported, not crashed on."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingInputError(InputError):
    """No birth date was supplied."""

    def __init__(self, message: str = "Please select your Gregorian birth date first.", **kwargs):
        super().__init__(message, **kwargs)


class MalformedDateError(InputError):
    """Birth date text is not in YYYY-MM-DD form."""

    def __init__(self, message: str, raw_value: Optional[str] = None,
                 expected_format: str = "YYYY-MM-DD", **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value
        self.expected_format = expected_format


class InvalidDateError(InputError):
    """Date fields fall outside the accepted window or the month's real length."""

    def __init__(self, message: str, year: Optional[int] = None, month: Optional[int] = None,
                 day: Optional[int] = None, max_day: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.year = year
        self.month = month
        self.day = day
        self.max_day = max_day

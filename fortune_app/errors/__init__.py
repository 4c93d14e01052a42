"""
Error classification for fortune generation.

Input errors are reported back to the user and stop a generation request.
System failures signal defects or broken collaborators and are not recovered.
"""

from .input_errors import (
    InputError,
    MissingInputError,
    MalformedDateError,
    InvalidDateError,
)
from .system_failures import (
    SystemFailureError,
    SampleInvariantError,
    CalendarLookupError,
    RenderingError,
    ConfigurationError,
)

__all__ = [
    # Input Errors
    "InputError",
    "MissingInputError",
    "MalformedDateError",
    "InvalidDateError",
    # System Failures
    "SystemFailureError",
    "SampleInvariantError",
    "CalendarLookupError",
    "RenderingError",
    "ConfigurationError",
]

"""
System failure error classifications for unrecoverable errors.

These exceptions represent defects or collaborator failures. They are
logged and re-raised, never turned into a partial result.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class SampleInvariantError(SystemFailureError):
    """A synthesized sample broke the OHLC ordering or value range."""

    def __init__(self, message: str, period: Optional[str] = None,
                 values: Optional[Dict[str, float]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.period = period
        self.values = values or {}


class CalendarLookupError(SystemFailureError):
    """Lunar calendar conversion failed or returned an unknown zodiac label."""

    def __init__(self, message: str, solar_date: Optional[str] = None,
                 label: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.solar_date = solar_date
        self.label = label


class RenderingError(SystemFailureError):
    """Chart rendering target failed or a handle was misused."""

    def __init__(self, message: str, renderer: Optional[str] = None,
                 handle_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.renderer = renderer
        self.handle_id = handle_id


class ConfigurationError(SystemFailureError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []

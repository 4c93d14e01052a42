"""Pytest configuration and shared fixtures."""

from datetime import date
from unittest.mock import Mock

import pytest

from fortune_app.data.models import Period, Sample, Series
from fortune_app.lunar.converter import LunarBirthInfo, LunarCalendar
from fortune_app.synthesis.random_source import FixedRandomSource
from fortune_app.synthesis.synthesizer import SeriesSynthesizer
from fortune_app.zodiac.cycle import ZodiacSign

SPAN_START = Period(2026, 2)
SPAN_END = Period(2036, 2)


def make_series(closes, start: Period = SPAN_START, initial: float = 50.0) -> Series:
    """Build a continuous series from a list of closes with 1-point wicks."""
    samples = []
    open_ = initial
    for offset, close in enumerate(closes):
        samples.append(Sample(
            period=start.shift(offset),
            open=open_,
            close=close,
            low=max(0.0, min(open_, close) - 1.0),
            high=min(100.0, max(open_, close) + 1.0),
        ))
        open_ = close
    return Series(samples)


@pytest.fixture
def fixed_source() -> FixedRandomSource:
    """Random source that always returns 0.5."""
    return FixedRandomSource(0.5)


@pytest.fixture
def synthesizer(fixed_source) -> SeriesSynthesizer:
    """Synthesizer with default parameters and a constant random source."""
    return SeriesSynthesizer(random_source=fixed_source)


@pytest.fixture
def horse_birth() -> LunarBirthInfo:
    """Lunar lookup result for 1990-06-15."""
    return LunarBirthInfo(
        solar_date=date(1990, 6, 15),
        lunar_month_label="五",
        lunar_day_label="廿三",
        sign=ZodiacSign.HORSE,
        year_ganzhi="庚午",
    )


@pytest.fixture
def mock_calendar(horse_birth) -> Mock:
    """Calendar double that always reports a Horse birth."""
    calendar = Mock(spec=LunarCalendar)
    calendar.lookup.return_value = horse_birth
    return calendar


@pytest.fixture
def series_factory():
    """Factory building continuous series from closes."""
    return make_series

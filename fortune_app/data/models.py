"""
Canonical data models for synthesized fortune series.

This module defines immutable data structures for monthly periods, OHLC
samples and whole series. Construction enforces the OHLC ordering, the
value range and month-to-month continuity.
"""

from dataclasses import dataclass, field
from datetime import date

from ..errors import SampleInvariantError
from ..utils.time import add_months, format_month, month_start_ms, months_between

VALUE_FLOOR = 0.0
VALUE_CEILING = 100.0


@dataclass(frozen=True, order=True)
class Period:
    """One calendar month of a span."""
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be 1-12, got {self.month}")

    @classmethod
    def from_date(cls, value: date) -> "Period":
        """Month containing a date; the day-of-month is dropped."""
        return cls(value.year, value.month)

    @property
    def label(self) -> str:
        """YYYY-MM label."""
        return format_month(self.year, self.month)

    @property
    def timestamp_ms(self) -> int:
        """UTC epoch milliseconds of the month's first day."""
        return month_start_ms(self.year, self.month)

    def shift(self, months: int) -> "Period":
        return Period(*add_months(self.year, self.month, months))

    def months_until(self, other: "Period") -> int:
        """Signed month offset from this period to another."""
        return months_between((self.year, self.month), (other.year, other.month))

    def __str__(self) -> str:
        return self.label


def iter_periods(start: Period, end: Period):
    """Yield every month from start to end inclusive; nothing if end precedes start."""
    for offset in range(start.months_until(end) + 1):
        yield start.shift(offset)


@dataclass(frozen=True)
class Sample:
    """Open/close/low/high values of one period."""
    period: Period
    open: float
    close: float
    low: float
    high: float

    def __post_init__(self):
        values = self.as_dict()
        if not all(VALUE_FLOOR <= v <= VALUE_CEILING for v in values.values()):
            raise SampleInvariantError(
                f"Sample values must lie within [{VALUE_FLOOR}, {VALUE_CEILING}]",
                period=self.period.label,
                values=values
            )
        if self.low > min(self.open, self.close):
            raise SampleInvariantError(
                f"Low {self.low} must be <= min(open {self.open}, close {self.close})",
                period=self.period.label,
                values=values
            )
        if self.high < max(self.open, self.close):
            raise SampleInvariantError(
                f"High {self.high} must be >= max(open {self.open}, close {self.close})",
                period=self.period.label,
                values=values
            )

    def as_dict(self) -> dict[str, float]:
        return {"open": self.open, "close": self.close, "low": self.low, "high": self.high}

    def as_values(self) -> list[float]:
        """Values in [open, close, low, high] order."""
        return [self.open, self.close, self.low, self.high]


@dataclass(frozen=True)
class Series:
    """Ordered monthly samples of one generation request."""
    samples: tuple[Sample, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable, store a tuple
        object.__setattr__(self, "samples", tuple(self.samples))

        for prev, curr in zip(self.samples, self.samples[1:]):
            if prev.period.months_until(curr.period) != 1:
                raise SampleInvariantError(
                    f"Period {curr.period.label} does not follow {prev.period.label}",
                    period=curr.period.label
                )
            if curr.open != prev.close:
                raise SampleInvariantError(
                    f"Open {curr.open} does not continue previous close {prev.close}",
                    period=curr.period.label,
                    values=curr.as_dict()
                )

    @property
    def labels(self) -> list[str]:
        """Period labels in order."""
        return [s.period.label for s in self.samples]

    @property
    def values(self) -> list[list[float]]:
        """[open, close, low, high] rows in order."""
        return [s.as_values() for s in self.samples]

    @property
    def is_empty(self) -> bool:
        return not self.samples

    def head(self, count: int) -> tuple[Sample, ...]:
        return self.samples[:count]

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)

    def __getitem__(self, index):
        return self.samples[index]

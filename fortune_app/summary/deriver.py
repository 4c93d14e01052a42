"""First-year trend and year-relation classification."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..data.models import Series
from ..zodiac.cycle import ZodiacSign
from ..zodiac.volatility import YearRelation, year_relation


class TrendDirection(Enum):
    """First-year direction of a series."""
    RISING = "rising"
    SETTLING = "settling"
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class FortuneSummary:
    """Classification consumed by the narrative composer."""
    trend: TrendDirection
    relation: YearRelation
    user_sign: ZodiacSign
    year_sign: ZodiacSign
    start_value: Optional[float] = None
    end_value: Optional[float] = None


class SummaryDeriver:
    """
    Classifies the first year of a series.

    The trend compares the first sample's open with the close of the last
    sample in the window (the twelfth by default). A series shorter than
    the window is reported as insufficient data instead of being indexed.
    """

    def __init__(self, window: int = 12):
        if window <= 0:
            raise ValueError(f"Window must be positive, got {window}")
        self.window = window

    def trend_of(self, series: Series) -> tuple[TrendDirection, Optional[float], Optional[float]]:
        """Trend of the first window with the compared start and end values."""
        first_year = series.head(self.window)
        if len(first_year) < self.window:
            return TrendDirection.INSUFFICIENT_DATA, None, None

        start_value = first_year[0].open
        end_value = first_year[-1].close
        trend = TrendDirection.RISING if end_value > start_value else TrendDirection.SETTLING
        return trend, start_value, end_value

    def derive(self, series: Series, user_sign: ZodiacSign, year_sign: ZodiacSign) -> FortuneSummary:
        """
        Summarize a series for a subject.

        Args:
            series: Synthesized series, possibly empty
            user_sign: Subject's zodiac sign
            year_sign: Zodiac sign of the span's first year

        Returns:
            FortuneSummary with trend and year relation
        """
        trend, start_value, end_value = self.trend_of(series)
        return FortuneSummary(
            trend=trend,
            relation=year_relation(user_sign, year_sign),
            user_sign=user_sign,
            year_sign=year_sign,
            start_value=start_value,
            end_value=end_value,
        )

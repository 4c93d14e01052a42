"""
Monthly fortune series synthesis.

Walks month by month across a span and emits one OHLC sample per month.
Each month's close is a random step sized by the zodiac volatility of
the month's year plus a slow sine trend, clamped into the close band;
wicks extend from the body by a random share of the same volatility and
are clamped into the value range.
"""

import math
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, Union

import structlog

from ..config.defaults import SynthesisParams, synthesis_params_from_dict, zodiac_params_from_dict
from ..data.models import Period, Sample, Series, iter_periods
from ..utils.time import MS_PER_YEAR
from ..zodiac.cycle import ZodiacCycle, ZodiacSign
from ..zodiac.volatility import VolatilityPolicy
from .random_source import RandomSource, seeded_source

logger = structlog.get_logger(__name__)

PeriodLike = Union[Period, date]


def round_value(value: float, precision: int = 1) -> float:
    """
    Round half away from zero on the exact binary value.

    Matches fixed-point formatting: 50.25 becomes 50.3, not 50.2.
    """
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


class SeriesSynthesizer:
    """Synthesizes a monthly OHLC fortune series for one zodiac sign."""

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        params: Optional[SynthesisParams] = None,
        cycle: Optional[ZodiacCycle] = None,
    ) -> None:
        self.params = params or SynthesisParams()
        self.cycle = cycle or ZodiacCycle()
        self.random_source = random_source if random_source is not None else seeded_source()
        self.policy = VolatilityPolicy(
            cycle=self.cycle,
            low_magnitude=self.params.low_volatility,
            high_magnitude=self.params.high_volatility,
        )

    @classmethod
    def from_config(cls, config: dict[str, Any],
                    random_source: Optional[RandomSource] = None) -> "SeriesSynthesizer":
        """Build a synthesizer from a merged configuration dictionary."""
        zodiac = zodiac_params_from_dict(config.get("zodiac", {}))
        return cls(
            random_source=random_source,
            params=synthesis_params_from_dict(config.get("synthesis", {})),
            cycle=ZodiacCycle(
                anchor_year=zodiac.anchor_year,
                anchor_sign=ZodiacSign.from_name(zodiac.anchor_sign),
            ),
        )

    def trend(self, period: Period) -> float:
        """Slow sine trend term of a month."""
        return math.sin(period.timestamp_ms / MS_PER_YEAR) * self.params.trend_amplitude

    def synthesize(self, start: PeriodLike, end: PeriodLike, user_sign: ZodiacSign) -> Series:
        """
        Generate one sample per month from start to end inclusive.

        Dates are reduced to their month, so a span always begins on the
        first day of the start month.

        Args:
            start: First month (or any date inside it)
            end: Last month (or any date inside it)
            user_sign: Zodiac sign of the subject

        Returns:
            Series of samples; empty when end precedes start
        """
        start_period = start if isinstance(start, Period) else Period.from_date(start)
        end_period = end if isinstance(end, Period) else Period.from_date(end)

        samples = []
        price = self.params.initial_price

        for period in iter_periods(start_period, end_period):
            sample, price = self._next_sample(period, price, user_sign)
            samples.append(sample)

        series = Series(samples)

        if series.is_empty:
            logger.warning(
                "Empty span, no samples synthesized",
                start=start_period.label,
                end=end_period.label
            )
        else:
            logger.info(
                "Series synthesized",
                user_sign=user_sign.english,
                months=len(series),
                first=series.labels[0],
                last=series.labels[-1]
            )

        return series

    def _next_sample(self, period: Period, price: float,
                     user_sign: ZodiacSign) -> tuple[Sample, float]:
        """Build one month's sample and return it with the unrounded close."""
        p = self.params
        rand = self.random_source.random
        volatility = self.policy.magnitude_for(user_sign, period.year)

        delta = (rand() - 0.5) * volatility + self.trend(period)

        open_ = price
        # Close band is applied before wicks are derived from the body
        close = _clamp(open_ + delta, p.close_floor, p.close_ceiling)

        high = min(p.value_ceiling, max(open_, close) + rand() * volatility * p.wick_spread)
        low = max(p.value_floor, min(open_, close) - rand() * volatility * p.wick_spread)

        sample = Sample(
            period=period,
            open=round_value(open_, p.precision),
            close=round_value(close, p.precision),
            low=round_value(low, p.precision),
            high=round_value(high, p.precision),
        )
        return sample, close

"""Zodiac cycle arithmetic and volatility classification."""

from .cycle import ZodiacCycle, ZodiacSign
from .volatility import VolatilityLevel, VolatilityPolicy, YearRelation

__all__ = [
    "ZodiacCycle",
    "ZodiacSign",
    "VolatilityLevel",
    "VolatilityPolicy",
    "YearRelation",
]

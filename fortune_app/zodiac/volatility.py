"""Volatility classification from zodiac cycle alignment."""

from dataclasses import dataclass, field
from enum import Enum

from .cycle import CYCLE_LENGTH, ZodiacCycle, ZodiacSign

OPPOSITION_DISTANCE = CYCLE_LENGTH // 2


class VolatilityLevel(Enum):
    """Two-level volatility step."""
    LOW = "low"
    HIGH = "high"


class YearRelation(Enum):
    """Relationship of a subject's sign to a year's sign."""
    SELF_YEAR = "self_year"
    OPPOSITION_YEAR = "opposition_year"
    ORDINARY = "ordinary"


def year_relation(user_sign: ZodiacSign, year_sign: ZodiacSign) -> YearRelation:
    """Classify a year as the subject's self-year, opposition-year or neither."""
    if user_sign is year_sign:
        return YearRelation.SELF_YEAR
    if ZodiacCycle.cyclic_distance(user_sign, year_sign) == OPPOSITION_DISTANCE:
        return YearRelation.OPPOSITION_YEAR
    return YearRelation.ORDINARY


@dataclass(frozen=True)
class VolatilityPolicy:
    """
    Derives per-year volatility from zodiac alignment.

    Self-years and opposition-years are HIGH, every other year is LOW.
    Intermediate distances are not graded.
    """
    cycle: ZodiacCycle = field(default_factory=ZodiacCycle)
    low_magnitude: float = 5.0
    high_magnitude: float = 15.0

    def level_for(self, user_sign: ZodiacSign, year: int) -> VolatilityLevel:
        """Volatility level of a calendar year for the given subject sign."""
        relation = year_relation(user_sign, self.cycle.sign_of(year))
        if relation is YearRelation.ORDINARY:
            return VolatilityLevel.LOW
        return VolatilityLevel.HIGH

    def magnitude(self, level: VolatilityLevel) -> float:
        """Value-scale magnitude of a volatility level."""
        return self.high_magnitude if level is VolatilityLevel.HIGH else self.low_magnitude

    def magnitude_for(self, user_sign: ZodiacSign, year: int) -> float:
        return self.magnitude(self.level_for(user_sign, year))

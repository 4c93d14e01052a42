"""Twelve-year zodiac cycle: year to sign mapping and cyclic distance."""

from dataclasses import dataclass
from enum import Enum

CYCLE_LENGTH = 12


class ZodiacSign(Enum):
    """Zodiac signs in cycle order, valued by English name and Chinese label."""
    RAT = ("Rat", "鼠")
    OX = ("Ox", "牛")
    TIGER = ("Tiger", "虎")
    RABBIT = ("Rabbit", "兔")
    DRAGON = ("Dragon", "龙")
    SNAKE = ("Snake", "蛇")
    HORSE = ("Horse", "马")
    GOAT = ("Goat", "羊")
    MONKEY = ("Monkey", "猴")
    ROOSTER = ("Rooster", "鸡")
    DOG = ("Dog", "狗")
    PIG = ("Pig", "猪")

    @property
    def english(self) -> str:
        return self.value[0]

    @property
    def chinese(self) -> str:
        return self.value[1]

    @property
    def index(self) -> int:
        """Position in the cycle, Rat = 0."""
        return _ORDER.index(self)

    @classmethod
    def from_index(cls, index: int) -> "ZodiacSign":
        return _ORDER[index % CYCLE_LENGTH]

    @classmethod
    def from_name(cls, name: str) -> "ZodiacSign":
        """Look up a sign by English name, case-insensitive. Raises KeyError."""
        return cls[name.strip().upper()]

    @classmethod
    def from_label(cls, label: str) -> "ZodiacSign":
        """Look up a sign by the Chinese label the lunar calendar reports."""
        for sign in cls:
            if sign.chinese == label:
                return sign
        raise KeyError(label)

    def __str__(self) -> str:
        return self.english


_ORDER = list(ZodiacSign)


@dataclass(frozen=True)
class ZodiacCycle:
    """Maps calendar years onto the zodiac cycle from a known anchor year."""
    anchor_year: int = 2026
    anchor_sign: ZodiacSign = ZodiacSign.HORSE

    def sign_of(self, year: int) -> ZodiacSign:
        """Zodiac sign of a calendar year."""
        return ZodiacSign.from_index(self.anchor_sign.index + (year - self.anchor_year))

    @staticmethod
    def cyclic_distance(a: ZodiacSign, b: ZodiacSign) -> int:
        """Minimum forward or backward steps between two signs, 0 to 6."""
        forward = (b.index - a.index) % CYCLE_LENGTH
        return min(forward, CYCLE_LENGTH - forward)

"""
Injectable sources of uniform random values in [0, 1).

Anything with a ``random()`` method returning a float in [0, 1) can drive
the synthesizer; ``random.Random`` instances qualify directly.
"""

import random
from collections.abc import Iterable
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Uniform random value provider."""

    def random(self) -> float:
        ...


def seeded_source(seed: Optional[int] = None) -> random.Random:
    """Independent generator, reproducible when a seed is given."""
    return random.Random(seed)


class FixedRandomSource:
    """Returns the same value on every call."""

    def __init__(self, value: float):
        if not 0.0 <= value < 1.0:
            raise ValueError(f"Random value must lie in [0, 1), got {value}")
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class SequenceRandomSource:
    """Replays a sequence of values in order, cycling when exhausted."""

    def __init__(self, values: Iterable[float]):
        self.values = list(values)
        if not self.values:
            raise ValueError("SequenceRandomSource needs at least one value")
        if not all(0.0 <= v < 1.0 for v in self.values):
            raise ValueError("Random values must lie in [0, 1)")
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value

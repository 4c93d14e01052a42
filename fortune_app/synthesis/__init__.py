"""Fortune series synthesis."""

from .random_source import FixedRandomSource, RandomSource, SequenceRandomSource, seeded_source
from .synthesizer import SeriesSynthesizer, round_value

__all__ = [
    "SeriesSynthesizer",
    "round_value",
    "RandomSource",
    "FixedRandomSource",
    "SequenceRandomSource",
    "seeded_source",
]

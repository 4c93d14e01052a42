"""First-year summary classification and narrative composition."""

from .deriver import FortuneSummary, SummaryDeriver, TrendDirection
from .narrative import Narrative, NarrativeComposer

__all__ = [
    "FortuneSummary",
    "SummaryDeriver",
    "TrendDirection",
    "Narrative",
    "NarrativeComposer",
]

"""Canned narrative text for a fortune summary."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..synthesis.random_source import RandomSource, seeded_source
from ..zodiac.volatility import YearRelation
from .deriver import FortuneSummary, TrendDirection

if TYPE_CHECKING:
    from ..lunar.converter import LunarBirthInfo

WEALTH_TEXTS = (
    "Wealth stars shine bright; regular income is steady and suits measured investing.",
    "Windfall luck runs strong with the odd pleasant surprise, but guard against impulse spending.",
    "Wealth luck is flat; hold rather than chase, and put savings first.",
    "Wealth luck swings widely; opportunities are many, and so are the risks.",
    "A side venture can bring solid returns; widen income and trim spending.",
)

LOVE_TEXTS = (
    "Romance is in bloom: singles may find a partner and couples grow closer.",
    "Love runs calm and steady; a trip together will deepen the bond.",
    "A few bumps ahead; talk more, forgive more and let small quarrels go.",
    "Your charm rises and social events may bring someone special.",
    "Focus on growing yourself and let love come naturally without forcing it.",
)

RELATION_TEXTS = {
    YearRelation.SELF_YEAR: (
        "Your own sign returns this year, so fortune rises and falls sharply; "
        "keep a low profile and wear red for luck."
    ),
    YearRelation.OPPOSITION_YEAR: (
        "This year opposes your sign and brings many changes; move rather than "
        "stand still, and seek change on your own terms such as a move or travel."
    ),
}

ORDINARY_TEXT = (
    "For those born in the Year of the {user_sign}, the Year of the {year_sign} "
    "holds both chances and challenges; stay positive and ride the wind."
)

TREND_TEXTS = {
    TrendDirection.RISING: "the overall trend is rising and fortune burns bright!",
    TrendDirection.SETTLING: "the year is a period of adjustment, gathering strength for what comes next.",
    TrendDirection.INSUFFICIENT_DATA: "there is not enough data to read the year's trend.",
}


@dataclass(frozen=True)
class Narrative:
    """Narrative lines shown next to the chart."""
    lunar_info: str
    wealth: str
    love: str
    overall: str

    def lines(self) -> list[str]:
        return [self.lunar_info, self.wealth, self.love, self.overall]


def pick(pool: tuple[str, ...], random_source: RandomSource) -> str:
    """Uniform pick from a fixed pool."""
    index = min(int(random_source.random() * len(pool)), len(pool) - 1)
    return pool[index]


class NarrativeComposer:
    """Composes narrative text from a summary and a lunar birth lookup."""

    def __init__(self, random_source: Optional[RandomSource] = None):
        self.random_source = random_source if random_source is not None else seeded_source()

    def relation_text(self, summary: FortuneSummary) -> str:
        if summary.relation in RELATION_TEXTS:
            return RELATION_TEXTS[summary.relation]
        return ORDINARY_TEXT.format(
            user_sign=summary.user_sign.english,
            year_sign=summary.year_sign.english,
        )

    def compose(self, summary: FortuneSummary, birth: "LunarBirthInfo", year: int) -> Narrative:
        """
        Build the narrative for one generation request.

        Args:
            summary: First-year classification
            birth: Lunar calendar lookup of the birth date
            year: First calendar year of the span

        Returns:
            Narrative with lunar line, wealth and love picks, and overall comment
        """
        year_label = f"{birth.year_ganzhi} year, " if birth.year_ganzhi else ""
        lunar_info = (
            f"Your lunar birthday: {year_label}month {birth.lunar_month_label}, "
            f"day {birth.lunar_day_label} (Year of the {birth.sign.english})"
        )
        header = f"{year} is the Year of the {summary.year_sign.english}."
        overall = f"{header} {self.relation_text(summary)} In {year}, {TREND_TEXTS[summary.trend]}"

        return Narrative(
            lunar_info=lunar_info,
            wealth=pick(WEALTH_TEXTS, self.random_source),
            love=pick(LOVE_TEXTS, self.random_source),
            overall=overall,
        )

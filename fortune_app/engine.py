"""
Main fortune generation coordinator.

Orchestrates a generation request: birth date validation, lunar lookup,
series synthesis, chart rendering and narrative composition.
"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.defaults import DateWindowParams, SpanParams, chart_params_from_dict
from .config.loader import ConfigLoader
from .data.models import Period, Series
from .data.validators import parse_and_validate, validate_birth_date
from .errors import InputError, SystemFailureError
from .logging.config import log_generation
from .lunar.converter import LunarBirthInfo, LunarCalendar
from .rendering.base import BaseChartRenderer, ChartHandle
from .rendering.echarts import EChartsRenderer
from .rendering.session import ChartSession
from .summary.deriver import FortuneSummary, SummaryDeriver
from .summary.narrative import Narrative, NarrativeComposer
from .synthesis.random_source import RandomSource, seeded_source
from .synthesis.synthesizer import SeriesSynthesizer
from .utils.time import format_date

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FortuneReport:
    """Everything one generation request produces."""
    birth: LunarBirthInfo
    series: Series
    summary: FortuneSummary
    narrative: Narrative
    chart: ChartHandle

    def to_dict(self) -> dict[str, Any]:
        return {
            "birth_date": format_date(self.birth.solar_date),
            "lunar_month": self.birth.lunar_month_label,
            "lunar_day": self.birth.lunar_day_label,
            "year_ganzhi": self.birth.year_ganzhi,
            "sign": self.birth.sign.english,
            "trend": self.summary.trend.value,
            "relation": self.summary.relation.value,
            "narrative": self.narrative.lines(),
            "chart": self.chart.payload.to_dict(),
        }


class FortuneEngine:
    """
    Main coordinator for fortune generation.

    Manages the generation pipeline:
    Birth Date → Validation → Lunar Lookup → Synthesis → Chart → Summary → Narrative
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None,
        calendar: Optional[LunarCalendar] = None,
        renderer: Optional[BaseChartRenderer] = None,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        """Initialize the fortune engine from merged configuration."""
        self.logger = logger

        self.config_loader = ConfigLoader.create(config_dir)
        self.config = self.config_loader.load_validated(overrides)

        self.random_source = random_source if random_source is not None else seeded_source()
        self.calendar = calendar or LunarCalendar()
        self.synthesizer = SeriesSynthesizer.from_config(self.config, self.random_source)
        self.deriver = SummaryDeriver(window=self.config["summary"]["trend_window"])
        self.composer = NarrativeComposer(self.random_source)

        self.date_window = DateWindowParams(**self.config["date_window"])
        span = SpanParams(**self.config["span"])
        self.span_start = Period.from_date(date.fromisoformat(span.start))
        self.span_end = Period.from_date(date.fromisoformat(span.end))

        chart_params = chart_params_from_dict(self.config["chart"])
        self.session = ChartSession(renderer or EChartsRenderer(params=chart_params))

        self.logger.info(
            "Fortune engine initialized",
            span_start=self.span_start.label,
            span_end=self.span_end.label,
            renderer=self.session.renderer.name
        )

    def generate(self, birth_date: Optional[str]) -> FortuneReport:
        """
        Run one generation request from YYYY-MM-DD text.

        Raises:
            InputError: If the birth date is missing, malformed or invalid
            SystemFailureError: If lookup, synthesis or rendering fails
        """
        try:
            solar_date = parse_and_validate(birth_date, self.date_window)
        except InputError as e:
            self.logger.warning("Birth date rejected", birth_date=birth_date, error=str(e))
            raise

        return self._generate(solar_date)

    def generate_for_date(self, solar_date: date) -> FortuneReport:
        """Run one generation request from a date object."""
        try:
            validate_birth_date(solar_date.year, solar_date.month, solar_date.day, self.date_window)
        except InputError as e:
            self.logger.warning("Birth date rejected", birth_date=format_date(solar_date), error=str(e))
            raise

        return self._generate(solar_date)

    def _generate(self, solar_date: date) -> FortuneReport:
        try:
            birth = self.calendar.lookup(solar_date)

            series, chart = self.session.show(
                lambda: self.synthesizer.synthesize(self.span_start, self.span_end, birth.sign)
            )

            first_year = self.span_start.year
            summary = self.deriver.derive(series, birth.sign, self.synthesizer.cycle.sign_of(first_year))
            narrative = self.composer.compose(summary, birth, first_year)

        except SystemFailureError as e:
            self.logger.error(
                "Fortune generation failed",
                birth_date=format_date(solar_date),
                error=str(e),
                error_type=type(e).__name__,
                context=e.context
            )
            raise

        log_generation(
            self.logger,
            birth_date=format_date(solar_date),
            sign=birth.sign.english,
            months=len(series),
            trend=summary.trend.value,
            context={"relation": summary.relation.value, "chart": chart.handle_id}
        )

        return FortuneReport(
            birth=birth,
            series=series,
            summary=summary,
            narrative=narrative,
            chart=chart,
        )

    @property
    def current_chart(self) -> Optional[ChartHandle]:
        return self.session.current

    def close(self) -> None:
        """Release the displayed chart."""
        self.session.close()
        self.logger.info("Fortune engine closed")

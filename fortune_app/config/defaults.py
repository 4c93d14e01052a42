"""Default configuration parameters for the fortune series generator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SynthesisParams:
    """Series synthesis parameters on the 0-100 fortune scale."""
    initial_price: float = 50.0                      # Opening level of the first month

    # Close walk band, tighter than the value range
    close_floor: float = 10.0
    close_ceiling: float = 90.0

    # Absolute value range for wicks
    value_floor: float = 0.0
    value_ceiling: float = 100.0

    # Volatility magnitudes
    low_volatility: float = 5.0                      # Ordinary years
    high_volatility: float = 15.0                    # Self-year and opposition-year

    wick_spread: float = 0.8                         # Fraction of volatility used for wicks
    trend_amplitude: float = 2.0                     # Sine trend amplitude
    precision: int = 1                               # Decimal digits in output


@dataclass(frozen=True)
class ZodiacParams:
    """Zodiac cycle anchor."""
    anchor_year: int = 2026
    anchor_sign: str = "Horse"


@dataclass(frozen=True)
class SpanParams:
    """Fixed generation window, start and end inclusive by month."""
    start: str = "2026-02-16"
    end: str = "2036-02-16"


@dataclass(frozen=True)
class DateWindowParams:
    """Accepted birth year window."""
    min_year: int = 1900
    max_year: int = 2026


@dataclass(frozen=True)
class SummaryParams:
    """First-year summary parameters."""
    trend_window: int = 12


@dataclass(frozen=True)
class ChartParams:
    """Candlestick chart appearance and output."""
    title: str = "Fortune Trend, Next Ten Years (2026-2036)"
    series_name: str = "Fortune"
    up_color: str = "#ff2e63"
    down_color: str = "#00e676"
    accent_color: str = "#00f3ff"
    peak_color: str = "#bc13fe"
    trough_color: str = "#2979ff"
    output_format: str = "html"                      # html, json
    echarts_cdn: str = "https://cdn.jsdelivr.net/npm/echarts@5/dist/echarts.min.js"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    synthesis: SynthesisParams
    zodiac: ZodiacParams
    span: SpanParams
    date_window: DateWindowParams
    summary: SummaryParams
    chart: ChartParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        synthesis=SynthesisParams(),
        zodiac=ZodiacParams(),
        span=SpanParams(),
        date_window=DateWindowParams(),
        summary=SummaryParams(),
        chart=ChartParams(),
    )


def synthesis_params_from_dict(values: dict) -> SynthesisParams:
    """Build synthesis parameters from a merged config section."""
    return SynthesisParams(**values)


def zodiac_params_from_dict(values: dict) -> ZodiacParams:
    """Build zodiac parameters from a merged config section."""
    return ZodiacParams(**values)


def chart_params_from_dict(values: dict) -> ChartParams:
    """Build chart parameters from a merged config section."""
    return ChartParams(**values)

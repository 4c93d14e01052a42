"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from datetime import MAXYEAR, MINYEAR, date
from typing import Any

from ..data.models import VALUE_CEILING, VALUE_FLOOR
from ..zodiac.cycle import ZodiacSign
from .defaults import (
    ChartParams,
    DateWindowParams,
    SpanParams,
    SummaryParams,
    SynthesisParams,
    ZodiacParams,
)

SECTION_TYPES = {
    "synthesis": SynthesisParams,
    "zodiac": ZodiacParams,
    "span": SpanParams,
    "date_window": DateWindowParams,
    "summary": SummaryParams,
    "chart": ChartParams,
}

OUTPUT_FORMATS = ("html", "json")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_section_keys(section: str, params: dict[str, Any]) -> list[ValidationError]:
        """Reject keys the section's dataclass does not declare."""
        known = {f.name for f in fields(SECTION_TYPES[section])}
        return [
            ValidationError(field=f"{section}.{key}", message="Unknown parameter", value=value)
            for key, value in params.items()
            if key not in known
        ]

    @staticmethod
    def validate_synthesis_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate synthesis parameters."""
        errors = []

        for name in ("initial_price", "close_floor", "close_ceiling", "value_floor",
                     "value_ceiling", "trend_amplitude"):
            if name in params and not _is_number(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a number",
                    value=params[name]
                ))

        for name in ("low_volatility", "high_volatility"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        if "wick_spread" in params:
            value = params["wick_spread"]
            if not _is_number(value) or value <= 0 or value > 1:
                errors.append(ValidationError(
                    field="wick_spread",
                    message="Must be a positive number between 0 and 1",
                    value=value
                ))

        if "precision" in params:
            value = params["precision"]
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 6:
                errors.append(ValidationError(
                    field="precision",
                    message="Must be an integer between 0 and 6",
                    value=value
                ))

        if errors:
            return errors

        # Band ordering needs the full merged section
        value_floor = params.get("value_floor", SynthesisParams.value_floor)
        value_ceiling = params.get("value_ceiling", SynthesisParams.value_ceiling)
        close_floor = params.get("close_floor", SynthesisParams.close_floor)
        close_ceiling = params.get("close_ceiling", SynthesisParams.close_ceiling)
        initial_price = params.get("initial_price", SynthesisParams.initial_price)

        if not VALUE_FLOOR <= value_floor <= close_floor < close_ceiling <= value_ceiling <= VALUE_CEILING:
            errors.append(ValidationError(
                field="close_floor",
                message=f"Bands must be ordered and lie inside [{VALUE_FLOOR}, {VALUE_CEILING}]",
                value=(close_floor, close_ceiling)
            ))

        if not close_floor <= initial_price <= close_ceiling:
            errors.append(ValidationError(
                field="initial_price",
                message="Must lie inside the close band",
                value=initial_price
            ))

        return errors

    @staticmethod
    def validate_zodiac_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate zodiac anchor parameters."""
        errors = []

        if "anchor_year" in params:
            value = params["anchor_year"]
            if not isinstance(value, int) or isinstance(value, bool):
                errors.append(ValidationError(
                    field="anchor_year",
                    message="Must be an integer",
                    value=value
                ))

        if "anchor_sign" in params:
            value = params["anchor_sign"]
            try:
                ZodiacSign.from_name(value)
            except (KeyError, AttributeError):
                errors.append(ValidationError(
                    field="anchor_sign",
                    message="Must be one of the twelve zodiac sign names",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_span_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate span boundaries."""
        errors = []

        for name in ("start", "end"):
            if name in params:
                value = params[name]
                try:
                    date.fromisoformat(value)
                except (TypeError, ValueError):
                    errors.append(ValidationError(
                        field=name,
                        message="Must be an ISO date (YYYY-MM-DD)",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_date_window_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate the accepted birth year window."""
        min_year = params.get("min_year", DateWindowParams.min_year)
        max_year = params.get("max_year", DateWindowParams.max_year)

        if not all(isinstance(y, int) and not isinstance(y, bool) for y in (min_year, max_year)) \
                or not MINYEAR <= min_year <= max_year <= MAXYEAR:
            return [ValidationError(
                field="min_year",
                message=f"Year window must be two ordered integers between {MINYEAR} and {MAXYEAR}",
                value=(min_year, max_year)
            )]

        return []

    @staticmethod
    def validate_summary_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate summary parameters."""
        if "trend_window" in params:
            value = params["trend_window"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                return [ValidationError(
                    field="trend_window",
                    message="Must be a positive integer",
                    value=value
                )]
        return []

    @staticmethod
    def validate_chart_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate chart parameters."""
        if "output_format" in params and params["output_format"] not in OUTPUT_FORMATS:
            return [ValidationError(
                field="output_format",
                message=f"Must be one of {', '.join(OUTPUT_FORMATS)}",
                value=params["output_format"]
            )]
        return []

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        validators = {
            "synthesis": ConfigValidator.validate_synthesis_params,
            "zodiac": ConfigValidator.validate_zodiac_params,
            "span": ConfigValidator.validate_span_params,
            "date_window": ConfigValidator.validate_date_window_params,
            "summary": ConfigValidator.validate_summary_params,
            "chart": ConfigValidator.validate_chart_params,
        }

        for section in config:
            if section not in validators:
                errors.append(ValidationError(field=section, message="Unknown section", value=config[section]))

        for section, validate in validators.items():
            if section not in config:
                continue
            if not isinstance(config[section], dict):
                errors.append(ValidationError(field=section, message="Must be a mapping", value=config[section]))
            else:
                errors.extend(ConfigValidator.validate_section_keys(section, config[section]))
                errors.extend(validate(config[section]))

        return errors

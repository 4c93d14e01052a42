"""
Centralized logging configuration for the fortune series generator.

This module provides standardized logging configuration using structlog
for all components. Synthesis, chart session and engine logging goes
through this configuration so every event carries the same structure.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import orjson
import structlog
from structlog.types import FilteringBoundLogger


def _shared_processors(include_timestamp: bool, include_caller: bool) -> list:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configure structlog for the whole generator.

    Log lines go to stderr by default so that the narrative printed on
    stdout stays clean. Calling this again replaces the previous setup.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Emit one JSON object per line instead of console output
        include_timestamp: Add a UTC ISO timestamp to every event
        include_caller: Add module and line number of the log call
        extra_processors: Processors inserted before the renderer
        stream: Destination stream, stderr when omitted
    """
    log_level = getattr(logging, level.upper())
    stream = stream or sys.stderr

    logging.basicConfig(
        level=log_level,
        stream=stream,
        format="%(message)s",
        force=True
    )

    processors = _shared_processors(include_timestamp, include_caller)
    processors.extend(extra_processors or [])

    if format_json:
        processors.append(structlog.processors.JSONRenderer(serializer=_orjson_dumps))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=stream.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _orjson_dumps(event_dict: dict[str, Any], **kwargs: Any) -> str:
    return orjson.dumps(event_dict, default=str).decode("utf-8")


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_session_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for chart session lifecycle events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for acquire/release tracking
    """
    return get_logger(name).bind(
        subsystem="chart_session",
        audit_trail=True
    )


def log_generation(
    logger: FilteringBoundLogger,
    birth_date: str,
    sign: str,
    months: int,
    trend: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a completed generation request with standardized format.

    Args:
        logger: Structlog logger instance
        birth_date: Validated birth date in YYYY-MM-DD form
        sign: Zodiac sign name of the birth date
        months: Number of synthesized samples
        trend: First-year trend classification
        context: Additional context data
    """
    bound_logger = logger.bind(
        birth_date=birth_date,
        sign=sign,
        months=months,
        trend=trend,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Fortune generated")

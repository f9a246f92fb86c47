"""Centralized structlog configuration for the scoring engine."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog


def configure_logging(
    json_output: bool = True,
    log_level: str = "INFO",
    include_timestamp: bool = True,
) -> None:
    """Configure structlog for the application.

    This should be called once at startup, typically at the top of a
    script's ``main`` before any scorer runs.

    Args:
        json_output: If True, output JSON logs (production). If False,
                    use colored console output (development).
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        include_timestamp: Include ISO timestamp in logs.
    """
    level = getattr(logging, log_level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    processors: list = [
        structlog.stdlib.add_log_level,
        # Merge context vars bound via structlog.contextvars
        structlog.contextvars.merge_contextvars,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.CallsiteParameterAdder(
            [
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
    ]

    if include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        A bound structlog logger.

    Example:
        logger = get_logger(__name__)
        logger.info("judge_scored", scorer="weather_llm_judge", score=0.8)
    """
    return structlog.get_logger(name)

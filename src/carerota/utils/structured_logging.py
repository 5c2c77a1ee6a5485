"""
Structured Logging
==================
structlog integration for run-level events (one event per CLI run).

Events are written to stderr so that stdout carries only the schedule.

Usage:
    from carerota.utils.structured_logging import configure_structlog, get_structured_logger

    configure_structlog(json_output=True, level="INFO")
    log = get_structured_logger("carerota.cli")
    log.info("preview_generated", weeks=4, base_index=2)
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
import structlog.contextvars

from .logging_setup import TRACE


def configure_structlog(
    json_output: bool = False,
    level: str = "WARNING",
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for the application.

    Args:
        json_output: If True, output JSON lines (for log shipping).
                    If False, use colored console output.
        level: Minimum level name for emitted events
        stream: Destination (defaults to stderr)
    """
    level_no = TRACE if level.upper() == "TRACE" else getattr(logging, level.upper(), logging.WARNING)
    # make_filtering_bound_logger has no TRACE tier; treat it as DEBUG
    level_no = max(level_no, logging.DEBUG)
    out = stream or sys.stderr

    if json_output:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=out.isatty() if hasattr(out, "isatty") else False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=out),
        cache_logger_on_first_use=False,
    )


def get_structured_logger(name: str) -> Any:
    """
    Get a structured logger.

    Args:
        name: Logger name (e.g., "carerota.cli")

    Returns:
        structlog bound logger
    """
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """
    Bind context variables for all subsequent log calls.

    Args:
        **kwargs: Context values (e.g., config="config.json")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()

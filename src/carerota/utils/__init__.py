"""Utilities package for the caretaker rotation."""
from .logging_setup import (
    TRACE,
    get_logger,
    level_from_verbosity,
    log_function_call,
    setup_logging,
)
from .structured_logging import configure_structlog, get_structured_logger

__all__ = [
    "setup_logging",
    "get_logger",
    "log_function_call",
    "level_from_verbosity",
    "configure_structlog",
    "get_structured_logger",
    "TRACE",
]

"""
Caretaker Rotation: Logging Infrastructure
==========================================
Multi-level logging with file rotation and function tracing.

Console output goes to stderr so that stdout carries only the schedule.

Levels:
    TRACE (5): Function entry/exit with arguments
    DEBUG (10): Per-week rotation details
    INFO (20): Loaded configuration, generated preview
    WARNING (30): Suspicious but valid configuration
    ERROR (40): Fatal configuration or rotation errors
"""
import functools
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable, Optional

# Custom TRACE level (below DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

ROOT_LOGGER = "carerota"


class ColoredFormatter(logging.Formatter):
    """Formatter with ANSI colors for console output."""

    COLORS = {
        TRACE: "\033[90m",      # Gray
        logging.DEBUG: "\033[36m",     # Cyan
        logging.INFO: "\033[32m",      # Green
        logging.WARNING: "\033[33m",   # Yellow
        logging.ERROR: "\033[31m",     # Red
        logging.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, *args, stream=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.stream = stream

    def format(self, record):
        color = self.COLORS.get(record.levelno, "")
        message = super().format(record)
        stream = self.stream or sys.stderr
        if color and hasattr(stream, "isatty") and stream.isatty():
            return f"{color}{message}{self.RESET}"
        return message


def level_from_verbosity(verbose: int, base: str = "WARNING") -> str:
    """
    Lower ``base`` by one level per repeated ``-v``.

    From WARNING: -v INFO, -vv DEBUG, -vvv TRACE. From ERROR, -v gives WARNING.
    An unrecognised base counts as WARNING.
    """
    order = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE"]
    name = base.upper()
    start = order.index(name) if name in order else order.index("WARNING")
    return order[min(start + max(verbose, 0), len(order) - 1)]


def _parse_level(name: str) -> int:
    if name.upper() == "TRACE":
        return TRACE
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console_level: Optional[str] = None,
    max_bytes: int = 1024 * 1024,  # 1 MB
    backup_count: int = 3,
) -> logging.Logger:
    """
    Configure application logging.

    Args:
        level: Minimum log level for file output
        log_file: Path to log file (None = no file logging)
        console_level: Console log level (defaults to level)
        max_bytes: Max size before rotation
        backup_count: Number of backup files to keep

    Returns:
        Root logger for the application
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(TRACE)  # Capture everything, handlers filter

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_level = _parse_level(level)
    cons_level = _parse_level(console_level or level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(cons_level)
    console_handler.setFormatter(ColoredFormatter(
        "[%(asctime)s] %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    ))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)

    logger.debug(
        f"Logging initialized: console={logging.getLevelName(cons_level)}, "
        f"file={logging.getLevelName(file_level) if log_file else 'disabled'}"
    )
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (e.g., "carerota.engine")

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_function_call(func: Callable) -> Callable:
    """
    Decorator to log function entry and exit with arguments.

    Usage:
        @log_function_call
        def my_function(x, y):
            return x + y
    """
    logger = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        func_name = func.__name__

        args_str = ", ".join([repr(a)[:50] for a in args[:3]])
        kwargs_str = ", ".join([f"{k}={repr(v)[:30]}" for k, v in list(kwargs.items())[:3]])
        call_str = f"{args_str}, {kwargs_str}" if kwargs_str and args_str else args_str or kwargs_str
        logger.log(TRACE, f"→ {func_name}({call_str})")

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.debug(f"✖ {func_name} raised: {type(e).__name__}: {e}")
            raise
        result_str = repr(result)[:100] if result is not None else "None"
        logger.log(TRACE, f"← {func_name} returned: {result_str}")
        return result

    return wrapper

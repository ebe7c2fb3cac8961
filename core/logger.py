"""
Logging setup for the Roman Numeral Calculator.

All modules should use setup_logger(__name__) to get a configured logger.
Console output is limited to warnings unless verbose mode is enabled.
"""

import logging
import sys
from typing import Optional

DEFAULT_LOG_LEVEL = logging.INFO
USER_LOG_LEVEL = logging.WARNING
SIMPLE_FORMAT = "[%(levelname)s] %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str,
    level: int = DEFAULT_LOG_LEVEL,
    format_string: Optional[str] = None,
    verbose: bool = False,
) -> logging.Logger:
    """
    Creates or retrieves a logger with a stderr handler attached.

    Args:
        name: Logger name (typically __name__)
        level: Logger level (default: INFO)
        format_string: Custom format for console messages
        verbose: If True, console shows everything at `level`; otherwise only warnings/errors

    Returns:
        Configured Logger instance
    """
    logger = logging.getLogger(name)

    # Only configure once per logger
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level if verbose else USER_LOG_LEVEL)
        console_handler.setFormatter(logging.Formatter(
            fmt=format_string or SIMPLE_FORMAT,
            datefmt=DEFAULT_DATE_FORMAT,
        ))

        logger.addHandler(console_handler)
        logger.setLevel(level)
        logger.propagate = False

    return logger


def set_verbose(verbose: bool = True) -> None:
    """Switches every calculator logger's console output to DEBUG (or back to WARNING)."""
    console_level = logging.DEBUG if verbose else USER_LOG_LEVEL
    logger_level = logging.DEBUG if verbose else DEFAULT_LOG_LEVEL
    # Verbose output carries timestamps and logger names
    formatter = logging.Formatter(
        fmt=DETAILED_FORMAT if verbose else SIMPLE_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
    )
    for name, obj in logging.root.manager.loggerDict.items():
        if not isinstance(obj, logging.Logger):
            continue
        if not name.startswith(("core", "services", "ui", "cli")):
            continue
        obj.setLevel(logger_level)
        for handler in obj.handlers:
            handler.setLevel(console_level)
            handler.setFormatter(formatter)

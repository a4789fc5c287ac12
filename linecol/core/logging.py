"""Logging setup for the linecol command-line tool."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "linecol"


def setup_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """Attach a Rich handler writing to stderr to the package logger.

    Calling this again replaces the previous handler.

    Args:
        level: Log level name (e.g., "DEBUG")
        console: Console to write to (default: stderr console)

    Returns:
        The configured package logger

    Raises:
        ValueError: If level is not a known log level name
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        logger.handlers.clear()
    logger.setLevel(log_level)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=log_level <= logging.DEBUG,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(log_level)
    logger.addHandler(handler)
    logger.propagate = False

    return logger

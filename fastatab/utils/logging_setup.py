"""
Logging configuration utilities.

Standard output carries data rows, so every handler set up here writes
to standard error.
"""

import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def resolve_level(level_name: str, default: int = logging.WARNING) -> int:
    """Map a level name such as "INFO" to its logging constant."""
    level = logging.getLevelName(level_name.upper())
    if isinstance(level, int):
        return level
    return default


def setup_logging(
    verbose: bool = False,
    level_name: str = "WARNING",
    stream: Optional[TextIO] = None,
    format_string: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the root logger with a single stderr handler.

    Args:
        verbose: Log at DEBUG level regardless of level_name
        level_name: Logging level name used when not verbose
        stream: Stream for the handler (default: sys.stderr)
        format_string: Log message format

    Returns:
        The configured root logger
    """
    level = logging.DEBUG if verbose else resolve_level(level_name)

    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(handler)

    return logger

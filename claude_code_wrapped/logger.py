"""Logging configuration for Claude Code Wrapped.

Uses loguru. Diagnostic messages go to stderr so that ``--json`` output on
stdout stays machine-readable.
"""

import sys

from loguru import logger

LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}"


def setup_logger(level: str = "WARNING") -> None:
    """Configure loguru with a single stderr handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Example:
        >>> setup_logger("DEBUG")
        >>> logger.debug("Reading stats cache")
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level,
        colorize=True,
        backtrace=False,
        diagnose=False,
    )


log = logger

"""Utility functions for Claude Code Wrapped.

This module provides shared helper functions used across the package:
- round_half_up(): Rounding that sends .5 away from zero for positive values
- format_number(): Abbreviated counts (1.2K, 3.4M, 5.6B)
- format_duration(): Human-readable duration from milliseconds
- format_cost(): Dollar amounts with magnitude-dependent precision
- pad_number(): Zero-padded counters for the terminal overview
- truncate(): Length-limited labels
- peak_index(): Position of the first maximum in a series
"""

import math
from typing import Sequence


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up.

    Python's built-in round() uses banker's rounding (round(2.5) == 2);
    summary averages and project estimates round 2.5 to 3.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(2.49)
        2
    """
    return int(math.floor(value + 0.5))


def format_number(num: float) -> str:
    """Format large numbers with K/M/B abbreviations.

    Example:
        >>> format_number(1234)
        '1.2K'
        >>> format_number(15_300_000)
        '15.3M'
        >>> format_number(999)
        '999'
    """
    if num >= 1_000_000_000:
        return f"{num / 1_000_000_000:.1f}B"
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(num)


def format_duration(ms: float) -> str:
    """Format a duration in milliseconds as a human-readable string.

    Args:
        ms: Duration in milliseconds

    Returns:
        Formatted string like "45m" or "2h 30m"

    Example:
        >>> format_duration(90 * 60 * 1000)
        '1h 30m'
        >>> format_duration(45 * 60 * 1000)
        '45m'
    """
    hours = int(ms // (1000 * 60 * 60))
    minutes = int((ms % (1000 * 60 * 60)) // (1000 * 60))
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_cost(cost: float) -> str:
    """Format an estimated cost with precision that shrinks as it grows.

    Example:
        >>> format_cost(12345.0)
        '12.3K'
        >>> format_cost(1234.4)
        '1,234'
        >>> format_cost(3.0)
        '3.00'
    """
    if cost >= 10000:
        return f"{cost / 1000:.1f}K"
    if cost >= 1000:
        return f"{round_half_up(cost):,}"
    if cost >= 100:
        return str(round_half_up(cost))
    if cost >= 10:
        return f"{cost:.1f}"
    return f"{cost:.2f}"


def pad_number(num: int, digits: int = 6) -> str:
    """Pad a number with leading zeros."""
    return str(num).zfill(digits)


def truncate(text: str, limit: int, suffix: str = "...") -> str:
    """Truncate text so that the result, suffix included, fits in ``limit``.

    Example:
        >>> truncate("a-very-long-project-name", 10)
        'a-very-...'
    """
    if len(text) <= limit:
        return text
    return text[: limit - len(suffix)] + suffix


def peak_index(counts: Sequence[int]) -> int:
    """Index of the first maximum (0 for an empty sequence).

    Example:
        >>> peak_index([1, 5, 5, 2])
        1
    """
    peak = 0
    for i, count in enumerate(counts):
        if count > counts[peak]:
            peak = i
    return peak

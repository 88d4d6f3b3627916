"""
Utility functions for the TT Umpire application.

This module contains the clock source and time formatting helpers shared by
the models and the hosts.
"""
import math
import time


def fmt_clock(seconds: int) -> str:
    """
    Format whole seconds as an M:SS string.

    Args:
        seconds: Non-negative number of seconds to format

    Returns:
        Formatted time string, minutes unpadded

    Example:
        >>> fmt_clock(110)
        '1:50'
        >>> fmt_clock(3661)
        '61:01'
    """
    m = seconds // 60
    s = seconds % 60
    return f"{m}:{s:02d}"


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def now_ts() -> float:
    """
    Get the current clock reading in seconds.

    Returns:
        Monotonic, non-decreasing time as floating point seconds
    """
    return time.monotonic()

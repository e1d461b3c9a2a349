"""
Time formatting utilities for human-readable output.
"""

from ..core.types import NANOSECONDS_PER_SECOND


def format_seconds(seconds: float) -> str:
    """
    Format a duration in seconds to a human-readable string.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted time string (e.g., "450.00 ms", "2.34 s", "1m 30.50s")
    """
    if seconds < 1:
        return f"{seconds * 1000:.2f} ms"
    elif seconds < 60:
        return f"{seconds:.2f} s"
    else:
        minutes = int(seconds / 60)
        return f"{minutes}m {seconds % 60:.2f}s"


def format_nanoseconds(nanoseconds: int) -> str:
    """Format a duration given in nanoseconds (e.g. a trace duration)."""
    return format_seconds(nanoseconds / NANOSECONDS_PER_SECOND)

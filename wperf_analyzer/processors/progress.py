"""
Progress calculation for reconstruction runs.
"""

from typing import Callable, Optional


def counter_fraction(
    core_index: int,
    core_count: int,
    counter_index: int,
    counter_count: int
) -> float:
    """
    Fraction of a snapshot already walked, weighting every core equally.

    Args:
        core_index: 0-based index of the current core
        core_count: Number of cores in the snapshot
        counter_index: 0-based index of the current counter within the core
        counter_count: Number of counters in the current core

    Returns:
        Value in [0, 1]
    """
    if core_count <= 0:
        return 1.0
    core_share = 1.0 / core_count
    within_core = counter_index / counter_count if counter_count > 0 else 1.0
    return min(1.0, core_index * core_share + within_core * core_share)


def calculate_progress(file_index: int, files_count: int, fraction_in_file: float) -> int:
    """
    Overall progress as an integer percentage.

    Args:
        file_index: 0-based index of the file being processed
        files_count: Total number of files in the run
        fraction_in_file: How far into the current file we are, in [0, 1]

    Returns:
        Integer in [0, 100]
    """
    if files_count <= 0:
        return 100
    fraction_in_file = max(0.0, min(1.0, fraction_in_file))
    return min(100, int((file_index + fraction_in_file) * 100 / files_count))


class ProgressReporter:
    """Forwards progress to an optional callback, never going backwards."""

    def __init__(self, callback: Optional[Callable[[int], None]] = None):
        self.callback = callback
        self.last: Optional[int] = None

    def report(self, value: int) -> None:
        value = max(0, min(100, value))
        if self.last is not None and value <= self.last:
            return
        self.last = value
        if self.callback is not None:
            self.callback(value)

"""Processors for wperf file classification, decoding and reconstruction."""

from .classifier import SchemaClassifier, validate_file
from .decoder import SnapshotDecoder
from .progress import ProgressReporter, calculate_progress, counter_fraction
from .reconstructor import TimelineReconstructor

__all__ = [
    "SchemaClassifier",
    "validate_file",
    "SnapshotDecoder",
    "ProgressReporter",
    "calculate_progress",
    "counter_fraction",
    "TimelineReconstructor",
]

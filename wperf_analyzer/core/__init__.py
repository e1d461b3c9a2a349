"""Core components for wperf analysis."""

from .types import (
    AnalyzerConfig,
    CookedEvent,
    DataSourceInfo,
    EventKey,
    FileKind,
    Timestamp,
    WperfEvent,
)
from .errors import MalformedInputError, NumericParseError, UnsupportedFileError, WperfError
from .context import ProcessingContext
from .analyzer import WperfAnalyzer

__all__ = [
    "AnalyzerConfig",
    "CookedEvent",
    "DataSourceInfo",
    "EventKey",
    "FileKind",
    "Timestamp",
    "WperfEvent",
    "MalformedInputError",
    "NumericParseError",
    "UnsupportedFileError",
    "WperfError",
    "ProcessingContext",
    "WperfAnalyzer",
]

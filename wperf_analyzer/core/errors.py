"""
Error taxonomy for wperf trace ingestion.
"""

from typing import Optional


class WperfError(Exception):
    """Base class for all wperf analyzer errors."""


class UnsupportedFileError(WperfError):
    """A file matched neither the timeline nor the count schema."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unsupported wperf file: {path}")


class MalformedInputError(WperfError):
    """A file matched a schema but could not be decoded into a snapshot."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class NumericParseError(WperfError, ValueError):
    """A telemetry string field could not be converted to a number."""

    def __init__(self, field: str, raw_value, path: Optional[str] = None):
        self.field = field
        self.raw_value = raw_value
        self.path = path
        message = f"Cannot parse telemetry {field} {raw_value!r} as a number"
        if path:
            message = f"{path}: {message}"
        super().__init__(message)

"""Output formatting utilities."""

from .time_formatter import format_nanoseconds, format_seconds

__all__ = ["format_nanoseconds", "format_seconds"]

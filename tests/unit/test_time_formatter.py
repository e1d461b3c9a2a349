"""
Unit tests for wperf_analyzer.formatters.time_formatter module.
"""
import pytest
from wperf_analyzer.formatters.time_formatter import format_nanoseconds, format_seconds


class TestFormatSeconds:
    """Tests for the format_seconds() function."""

    def test_format_milliseconds(self):
        """Sub-second durations are shown in milliseconds."""
        assert format_seconds(0.5) == "500.00 ms"
        assert format_seconds(0.25) == "250.00 ms"

    def test_format_seconds(self):
        """Durations under a minute are shown in seconds."""
        assert format_seconds(1) == "1.00 s"
        assert format_seconds(1.5) == "1.50 s"
        assert format_seconds(4.0) == "4.00 s"

    def test_format_minutes(self):
        """Longer durations are shown in minutes and seconds."""
        assert format_seconds(60) == "1m 0.00s"
        assert format_seconds(90) == "1m 30.00s"
        assert format_seconds(125.5) == "2m 5.50s"

    def test_zero_time(self):
        """Zero formats as milliseconds."""
        assert format_seconds(0) == "0.00 ms"


class TestFormatNanoseconds:
    """Tests for the format_nanoseconds() function."""

    def test_trace_duration(self):
        """Trace durations in nanoseconds are converted before formatting."""
        assert format_nanoseconds(4_000_000_000) == "4.00 s"
        assert format_nanoseconds(250_000_000) == "250.00 ms"
        assert format_nanoseconds(0) == "0.00 ms"

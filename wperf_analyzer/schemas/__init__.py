"""Wire-format models for wperf JSON output."""

from .models import (
    COUNT_SCHEMA,
    SCHEMAS,
    TIMELINE_SCHEMA,
    CounterReading,
    PerCoreCounters,
    TelemetryMetric,
    WperfStats,
    WperfTimeline,
)

__all__ = [
    "COUNT_SCHEMA",
    "SCHEMAS",
    "TIMELINE_SCHEMA",
    "CounterReading",
    "PerCoreCounters",
    "TelemetryMetric",
    "WperfStats",
    "WperfTimeline",
]

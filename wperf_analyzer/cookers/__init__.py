"""Data cookers consuming the reconstructed event stream."""

from .base import DataCooker
from .count_cooker import WperfCountDataCooker
from .timestamp_cookers import WperfTelemetryDataCooker, WperfTimelineDataCooker
from .router import EventRouter

__all__ = [
    "DataCooker",
    "WperfCountDataCooker",
    "WperfTelemetryDataCooker",
    "WperfTimelineDataCooker",
    "EventRouter",
]

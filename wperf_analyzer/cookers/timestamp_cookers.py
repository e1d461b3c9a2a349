"""
Cookers that attach relative start/end timestamps to events.
"""

from typing import Optional

from ..core.types import CookedEvent, EventKey, Timestamp, WperfEvent
from .base import DataCooker


class _RelativeTimestampCooker(DataCooker[CookedEvent]):

    def cook(self, event: WperfEvent) -> Optional[CookedEvent]:
        return CookedEvent(
            event=event,
            relative_start=Timestamp.from_seconds(event.start_time),
            relative_end=Timestamp.from_seconds(event.end_time),
        )


class WperfTimelineDataCooker(_RelativeTimestampCooker):
    """Adds relative timestamps to timeline counting events."""

    cooker_id = "WperfDataCooker"
    description = "Adds relative timestamps to counting events"
    data_keys = frozenset({EventKey.TIMELINE_COUNT})


class WperfTelemetryDataCooker(_RelativeTimestampCooker):
    """Adds relative timestamps to telemetry events."""

    cooker_id = "WperfTelemetryCooker"
    description = "Adds relative timestamps to telemetry events"
    data_keys = frozenset({EventKey.TELEMETRY})

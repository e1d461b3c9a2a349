"""
Pass-through cooker for counting events.
"""

from typing import Optional

from ..core.types import EventKey, WperfEvent
from .base import DataCooker


class WperfCountDataCooker(DataCooker[WperfEvent]):
    """
    Passes counting events on unchanged. Timeline counting events are
    accepted too, so the counting tables show totals over the whole timeline.
    """

    cooker_id = "WperfCountDataCooker"
    description = "Passes on the counting data as is"
    data_keys = frozenset({EventKey.COUNT, EventKey.TIMELINE_COUNT})

    def cook(self, event: WperfEvent) -> Optional[WperfEvent]:
        return event

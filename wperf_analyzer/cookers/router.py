"""
Event routing from the reconstructor to the cookers.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence

from ..core.types import EventKey, WperfEvent
from .base import DataCooker

logger = logging.getLogger(__name__)


class EventRouter:
    """
    Delivers every event, in stream order, to each cooker whose ``data_keys``
    contain the event's key. Events no cooker accepts are dropped.
    """

    def __init__(self, cookers: Sequence[DataCooker]):
        self.cookers = list(cookers)
        self._by_key: Dict[EventKey, List[DataCooker]] = {
            key: [cooker for cooker in self.cookers if key in cooker.data_keys]
            for key in EventKey
        }
        self.delivered: Dict[EventKey, int] = defaultdict(int)
        self.dropped = 0

    def route(self, event: WperfEvent) -> int:
        """
        Route one event.

        Returns:
            Number of cookers that processed the event
        """
        consumers = self._by_key[event.key]
        if not consumers:
            self.dropped += 1
            return 0

        processed = 0
        for cooker in consumers:
            if cooker.process(event):
                processed += 1
        self.delivered[event.key] += 1
        return processed

    def route_all(self, events: Iterable[WperfEvent]) -> Dict[str, Sequence]:
        """
        Route a whole event stream.

        Returns:
            Dictionary mapping cooker_id -> cooked output list
        """
        for event in events:
            self.route(event)

        logger.debug(
            "Routed %s events, dropped %d",
            {key.name: count for key, count in self.delivered.items()},
            self.dropped
        )
        return self.outputs()

    def outputs(self) -> Dict[str, Sequence]:
        return {cooker.cooker_id: cooker.output for cooker in self.cookers}

"""
Base class for data cookers.
"""

from typing import FrozenSet, Generic, List, Optional, Sequence, TypeVar

from ..core.types import EventKey, WperfEvent

T = TypeVar('T')


class DataCooker(Generic[T]):
    """
    Consumes the events whose key is in ``data_keys`` and appends one cooked
    item per accepted event to its output list, in delivery order.

    Subclasses implement ``cook``; returning None rejects the event.
    """

    cooker_id: str = ""
    description: str = ""
    data_keys: FrozenSet[EventKey] = frozenset()

    def __init__(self):
        self._output: List[T] = []

    @property
    def output(self) -> Sequence[T]:
        """Cooked items in the order their source events were delivered."""
        return tuple(self._output)

    def accepts(self, event: WperfEvent) -> bool:
        return event.key in self.data_keys

    def cook(self, event: WperfEvent) -> Optional[T]:
        raise NotImplementedError

    def process(self, event: WperfEvent) -> bool:
        """
        Cook one event and store the result.

        Returns:
            True if the event was processed, False if it was rejected
        """
        cooked = self.cook(event)
        if cooked is None:
            return False
        self._output.append(cooked)
        return True

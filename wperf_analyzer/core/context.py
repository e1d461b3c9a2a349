"""
Run-scoped state shared by the classifier and the reconstructor.
"""

import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from .types import FileKind


class ProcessingContext:
    """
    Holds the classification cache and the accumulated file paths of one
    processing run.

    Paths are kept in insertion order with set semantics, so a file probed
    several times is recorded once and files are processed in the order they
    were first classified.
    """

    def __init__(self, cancel_event: Optional[threading.Event] = None):
        self.validation_cache: Dict[Tuple[str, str], bool] = {}
        self.timeline_paths: Dict[str, None] = {}
        self.count_paths: Dict[str, None] = {}
        self.cancel_event = cancel_event or threading.Event()
        self.start_wall_clock: Optional[datetime] = None
        self.total_elapsed = 0.0

    def record(self, path: str, kind: FileKind) -> None:
        """Add a classified path to the matching accumulator."""
        if kind == FileKind.TIMELINE:
            self.timeline_paths.setdefault(path, None)
        elif kind == FileKind.COUNT:
            self.count_paths.setdefault(path, None)

    def begin_run(self) -> Tuple[List[str], List[str]]:
        """
        Take the accumulated paths for a new run and reset the accumulators
        and the validation cache.

        Returns:
            Tuple of (timeline_paths, count_paths)
        """
        timeline_paths = list(self.timeline_paths)
        count_paths = list(self.count_paths)
        self.timeline_paths = {}
        self.count_paths = {}
        self.validation_cache = {}
        self.start_wall_clock = datetime.now(timezone.utc)
        self.total_elapsed = 0.0
        return timeline_paths, count_paths

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

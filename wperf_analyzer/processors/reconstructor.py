"""
Timeline reconstruction: turns decoded snapshots into a flat, time-stamped
event stream.
"""

import logging
import os
from datetime import datetime, timezone
from typing import Iterator, List, Optional, Sequence

from ..core.context import ProcessingContext
from ..core.errors import MalformedInputError, NumericParseError
from ..core.types import (
    NANOSECONDS_PER_SECOND,
    DataSourceInfo,
    EventKey,
    FileKind,
    WperfEvent,
)
from ..schemas import WperfStats
from .decoder import SnapshotDecoder
from .progress import ProgressReporter, calculate_progress, counter_fraction

logger = logging.getLogger(__name__)


class TimelineReconstructor:
    """
    Emits one ``WperfEvent`` per counter reading and telemetry metric.

    Elapsed time accumulates across every timeline file of a run, in file
    order and then in array order, so snapshot *i* covers the window
    ``[sum(e0..e(i-1)), sum(e0..ei)]``. Count files produce events with
    zero start and end times.
    """

    def __init__(
        self,
        context: ProcessingContext,
        decoder: Optional[SnapshotDecoder] = None,
        progress: Optional[ProgressReporter] = None
    ):
        """
        Args:
            context: Run-scoped state; holds the elapsed-time accumulator and
                     the cancellation signal
            decoder: SnapshotDecoder instance
            progress: Optional reporter for 0-100 progress updates
        """
        self.context = context
        self.decoder = decoder or SnapshotDecoder()
        self.progress = progress or ProgressReporter()
        self.failed_files: List[MalformedInputError] = []
        self._files_done = 0
        self._files_total = 0

    def reconstruct(self, paths: Sequence[str], kind: FileKind) -> List[WperfEvent]:
        """Collect the events of a file set into a list."""
        return list(self.iter_events(paths, kind))

    def iter_run(self, timeline_paths: Sequence[str], count_paths: Sequence[str]) -> Iterator[WperfEvent]:
        """
        Emit the events of a whole run: timeline files first, then count files.
        Progress is weighted over both file sets.
        """
        self._files_done = 0
        self._files_total = len(timeline_paths) + len(count_paths)
        yield from self._iter_file_set(timeline_paths, FileKind.TIMELINE)
        yield from self._iter_file_set(count_paths, FileKind.COUNT)
        self._finish()

    def iter_events(self, paths: Sequence[str], kind: FileKind) -> Iterator[WperfEvent]:
        """
        Emit the events of one file set in order.

        Args:
            paths: Files of a single kind, in processing order
            kind: FileKind.TIMELINE or FileKind.COUNT

        Yields:
            WperfEvent instances; stops early without raising when the
            context's cancellation signal is set
        """
        self._files_done = 0
        self._files_total = len(paths)
        yield from self._iter_file_set(paths, kind)
        self._finish()

    def _iter_file_set(self, paths: Sequence[str], kind: FileKind) -> Iterator[WperfEvent]:
        if self.context.start_wall_clock is None:
            self.context.start_wall_clock = datetime.now(timezone.utc)
        if kind == FileKind.TIMELINE:
            self.context.total_elapsed = 0.0

        for path in paths:
            if self.context.cancelled:
                logger.info("Reconstruction cancelled before %s", path)
                return
            try:
                if kind == FileKind.TIMELINE:
                    snapshots = self._read_timeline(path)
                elif kind == FileKind.COUNT:
                    snapshots = [self._read_count(path)]
                else:
                    raise ValueError(f"Cannot reconstruct events from {kind.value} files")
            except (MalformedInputError, NumericParseError) as e:
                logger.warning("Skipping %s: %s", path, e)
                self.failed_files.append(e)
                self._files_done += 1
                continue

            if snapshots is None:
                return

            for snapshot_index, snapshot in enumerate(snapshots):
                if self.context.cancelled:
                    logger.info("Reconstruction cancelled inside %s", path)
                    return
                if kind == FileKind.TIMELINE:
                    start_time = self.context.total_elapsed
                    self.context.total_elapsed += snapshot.elapsed_seconds
                    end_time = self.context.total_elapsed
                    counter_key = EventKey.TIMELINE_COUNT
                else:
                    start_time = end_time = 0.0
                    counter_key = EventKey.COUNT

                yield from self._snapshot_events(
                    snapshot, counter_key, start_time, end_time,
                    snapshot_index, len(snapshots)
                )

            self._files_done += 1
            self._report(0.0)

    def _read_count(self, path: str) -> WperfStats:
        with open(path, 'rb') as f:
            content = f.read()
        self._report(0.5)
        return self.decoder.decode(content, path)

    def _read_timeline(self, path: str) -> Optional[List[WperfStats]]:
        """
        Decode every snapshot of a timeline file before any event is emitted,
        so a malformed file contributes neither events nor elapsed time.
        Returns None if cancelled while reading.
        """
        size = os.path.getsize(path) or 1
        snapshots = []
        with open(path, 'rb') as f:
            for snapshot in self.decoder.iter_timeline(f, path):
                snapshots.append(snapshot)
                # First half of the file's share covers parsing
                self._report(0.5 * min(1.0, f.tell() / size))
                if self.context.cancelled:
                    logger.info("Reconstruction cancelled while reading %s", path)
                    return None
        logger.debug("Read %d snapshots from %s", len(snapshots), path)
        return snapshots

    def _snapshot_events(
        self,
        snapshot: WperfStats,
        counter_key: EventKey,
        start_time: float,
        end_time: float,
        snapshot_index: int,
        snapshot_count: int
    ) -> Iterator[WperfEvent]:
        core_count = len(snapshot.core_counters)
        for core_index, core in enumerate(snapshot.core_counters):
            counter_count = len(core.counters)
            for counter_index, reading in enumerate(core.counters):
                if self.context.cancelled:
                    return
                yield WperfEvent(
                    key=counter_key,
                    core_number=core.core_number,
                    name=reading.event_name,
                    value=float(reading.counter_value),
                    index=reading.event_idx,
                    note=reading.event_note,
                    start_time=start_time,
                    end_time=end_time,
                )
                walked = counter_fraction(core_index, core_count, counter_index + 1, counter_count)
                self._report(0.5 + 0.5 * (snapshot_index + walked) / snapshot_count)

        for metric in snapshot.telemetry_metrics:
            if self.context.cancelled:
                return
            yield WperfEvent(
                key=EventKey.TELEMETRY,
                core_number=metric.core_label(),
                name=metric.metric_name,
                value=metric.parsed_value(),
                unit=metric.unit,
                product_name=metric.product_name,
                start_time=start_time,
                end_time=end_time,
            )

    def _finish(self) -> None:
        # A cancelled run stops short of completion
        if not self.context.cancelled:
            self.progress.report(100)

    def _report(self, fraction_in_file: float) -> None:
        self.progress.report(
            calculate_progress(self._files_done, self._files_total, fraction_in_file)
        )

    def data_source_info(self) -> DataSourceInfo:
        """
        Trace-level timing for the run. Only final once reconstruction has
        consumed every timeline file.
        """
        return DataSourceInfo(
            start_wall_clock=self.context.start_wall_clock,
            duration_nanoseconds=int(round(self.context.total_elapsed * NANOSECONDS_PER_SECOND)),
        )

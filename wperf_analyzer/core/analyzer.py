"""
Main wperf analyzer orchestrator.
"""

import threading
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..cookers import (
    EventRouter,
    WperfCountDataCooker,
    WperfTelemetryDataCooker,
    WperfTimelineDataCooker,
)
from ..core.context import ProcessingContext
from ..core.errors import MalformedInputError, UnsupportedFileError
from ..core.types import WPERF_PRESET_METRICS, AnalyzerConfig, DataSourceInfo, FileKind
from ..formatters import format_nanoseconds
from ..processors import (
    ProgressReporter,
    SchemaClassifier,
    SnapshotDecoder,
    TimelineReconstructor,
)
from ..tables import Table, TableProjector


class WperfAnalyzer:
    """Main orchestrator for wperf counting and timeline analysis."""

    def __init__(
        self,
        pad_group_tables: bool = True,
        include_telemetry: bool = True,
        telemetry_presets: Tuple[str, ...] = WPERF_PRESET_METRICS,
        progress_callback: Optional[Callable[[int], None]] = None
    ):
        """
        Initialize the WperfAnalyzer.

        Args:
            pad_group_tables: If True, per-category tables are padded with hidden
                              placeholder rows to a common row count
            include_telemetry: If True, telemetry metrics are cooked into tables
            telemetry_presets: Unit labels that get their own telemetry table
            progress_callback: Optional callable receiving 0-100 progress updates
        """
        # Configuration
        self.config = AnalyzerConfig(
            pad_group_tables=pad_group_tables,
            include_telemetry=include_telemetry,
            telemetry_presets=telemetry_presets
        )
        self.progress_callback = progress_callback

        # Results of the last run
        self.data_source_info: Optional[DataSourceInfo] = None
        self.cooked: Dict[str, Sequence] = {}
        self.tables: List[Table] = []
        self.timeline_files: List[str] = []
        self.count_files: List[str] = []
        self.unsupported_files: List[UnsupportedFileError] = []
        self.failed_files: List[MalformedInputError] = []
        self.event_count = 0

        # Initialize components
        self.decoder = SnapshotDecoder()
        self.projector = TableProjector(self.config)

    def _create_cookers(self):
        cookers = [WperfCountDataCooker(), WperfTimelineDataCooker()]
        if self.config.include_telemetry:
            cookers.append(WperfTelemetryDataCooker())
        return cookers

    def process_files(
        self,
        file_paths: Iterable[str],
        cancel_event: Optional[threading.Event] = None
    ) -> "WperfAnalyzer":
        """
        Classify the given files, reconstruct their event stream, cook it and
        build the tables.

        Args:
            file_paths: Paths to wperf JSON files (count or timeline shape)
            cancel_event: Optional event; setting it stops reconstruction early
                          and keeps what was produced so far

        Returns:
            self, for chaining
        """
        context = ProcessingContext(cancel_event)
        classifier = SchemaClassifier(context)

        # Step 1: Classify every file; unsupported ones are recorded and skipped
        self.unsupported_files = []
        for path in file_paths:
            if classifier.classify(path) == FileKind.UNSUPPORTED:
                self.unsupported_files.append(UnsupportedFileError(path))

        self.timeline_files, self.count_files = context.begin_run()
        print(f"Found {len(self.timeline_files)} timeline file(s), "
              f"{len(self.count_files)} count file(s), "
              f"{len(self.unsupported_files)} unsupported file(s)")

        # Step 2: Reconstruct and route events to the cookers
        reconstructor = TimelineReconstructor(
            context,
            self.decoder,
            ProgressReporter(self.progress_callback)
        )
        router = EventRouter(self._create_cookers())
        self.event_count = 0
        for event in reconstructor.iter_run(self.timeline_files, self.count_files):
            self.event_count += 1
            router.route(event)

        self.failed_files = list(reconstructor.failed_files)
        self.cooked = router.outputs()

        # Duration is only final once every timeline file has been consumed
        self.data_source_info = reconstructor.data_source_info()

        # Step 3: Build tables from the cooked lists
        self.tables = self.projector.build_tables(self.cooked)

        # Step 4: Report summary
        print(f"Reconstructed {self.event_count} events "
              f"over {format_nanoseconds(self.data_source_info.duration_nanoseconds)}")
        for cooker_id, items in self.cooked.items():
            print(f"  {cooker_id}: {len(items)} cooked events")
        print(f"Built {len(self.tables)} tables")
        if self.failed_files:
            print(f"Failed to decode {len(self.failed_files)} file(s)")
        if context.cancelled:
            print("Processing was cancelled; results are partial")

        return self

    def table(self, title: str) -> Table:
        """Return the first table with the given title."""
        for table in self.tables:
            if table.title == title:
                return table
        raise KeyError(f"No table titled {title!r}")

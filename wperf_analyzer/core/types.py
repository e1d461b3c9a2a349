"""
Type definitions for wperf trace analysis.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


# Unit labels that get their own telemetry sub-table
WPERF_PRESET_METRICS: Tuple[str, ...] = (
    "MPKI",
    "per TLB access",
    "per branch",
    "per cache access",
    "per cycle",
    "percent of cycles",
    "percent of operations",
    "percent of slots",
)

NANOSECONDS_PER_SECOND = 1_000_000_000


class EventKey(str, Enum):
    """Discriminator key selecting which cookers consume an event."""
    COUNT = "PerformanceCounterEvent"
    TIMELINE_COUNT = "PerformanceCounterTimelineEvent"
    TELEMETRY = "TelemetryEvent"


class FileKind(str, Enum):
    """Classification result for an input file."""
    TIMELINE = "timeline"
    COUNT = "count"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True, order=True)
class Timestamp:
    """Relative timestamp in nanoseconds from the start of the trace."""
    nanoseconds: int = 0

    @classmethod
    def from_seconds(cls, seconds: float) -> "Timestamp":
        return cls(int(round(seconds * NANOSECONDS_PER_SECOND)))

    def to_seconds(self) -> float:
        return self.nanoseconds / NANOSECONDS_PER_SECOND


@dataclass(frozen=True)
class WperfEvent:
    """
    A single measurement emitted by the reconstructor.

    Counting events (COUNT, TIMELINE_COUNT) carry ``index`` and ``note``;
    telemetry events carry ``unit`` and ``product_name``. Start and end times
    are seconds relative to the trace start and are 0 for count files.
    """
    key: EventKey
    core_number: int
    name: str
    value: float
    index: Optional[str] = None
    note: Optional[str] = None
    unit: Optional[str] = None
    product_name: Optional[str] = None
    start_time: float = 0.0
    end_time: float = 0.0

    @property
    def category(self) -> Optional[str]:
        """Grouping category: the note for counting events, the unit for telemetry."""
        match self.key:
            case EventKey.COUNT | EventKey.TIMELINE_COUNT:
                return self.note
            case EventKey.TELEMETRY:
                return self.unit


@dataclass(frozen=True)
class CookedEvent:
    """An event enriched with relative start/end timestamps."""
    event: WperfEvent
    relative_start: Timestamp = field(default_factory=Timestamp)
    relative_end: Timestamp = field(default_factory=Timestamp)

    # Row projections read these directly, so the event fields are mirrored
    @property
    def key(self) -> EventKey:
        return self.event.key

    @property
    def core_number(self) -> int:
        return self.event.core_number

    @property
    def name(self) -> str:
        return self.event.name

    @property
    def value(self) -> float:
        return self.event.value

    @property
    def index(self) -> Optional[str]:
        return self.event.index

    @property
    def note(self) -> Optional[str]:
        return self.event.note

    @property
    def unit(self) -> Optional[str]:
        return self.event.unit

    @property
    def product_name(self) -> Optional[str]:
        return self.event.product_name

    @property
    def category(self) -> Optional[str]:
        return self.event.category


@dataclass(frozen=True)
class DataSourceInfo:
    """Trace-level timing: wall clock at run start and total duration."""
    start_wall_clock: datetime
    duration_nanoseconds: int

    @property
    def duration_seconds(self) -> float:
        return self.duration_nanoseconds / NANOSECONDS_PER_SECOND


class AnalyzerConfig:
    """Configuration for wperf analysis."""

    def __init__(
        self,
        pad_group_tables: bool = True,
        include_telemetry: bool = True,
        telemetry_presets: Tuple[str, ...] = WPERF_PRESET_METRICS
    ):
        """
        Initialize analysis configuration.

        Args:
            pad_group_tables: If True, per-category tables are right-padded with
                              placeholder rows so every sibling table reports the
                              same row count as the unfiltered list.
                              Default: True

            include_telemetry: If True, telemetry metrics are cooked and get
                               their own tables.
                               Default: True

            telemetry_presets: Unit labels that get a telemetry sub-table.
                               Metrics with any other unit only appear in the
                               combined telemetry table.
        """
        self.pad_group_tables = pad_group_tables
        self.include_telemetry = include_telemetry
        self.telemetry_presets = tuple(telemetry_presets)

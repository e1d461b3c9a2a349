"""
Pydantic models for the two JSON shapes written by ``wperf stat``.

``WperfStats`` is one snapshot (the count shape); ``WperfTimeline`` wraps an
ordered array of snapshots. Only the core section is modelled field by field;
the DSU and DMC sections are carried as opaque objects.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from ..core.errors import NumericParseError


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class _ClosedWireModel(_WireModel):
    # Unknown keys fail validation instead of being dropped
    model_config = ConfigDict(extra="forbid")


class CounterReading(_ClosedWireModel):
    """A single performance counter reading on one core."""
    counter_value: StrictInt
    event_idx: StrictStr
    event_name: StrictStr
    event_note: StrictStr
    multiplexed: Optional[StrictStr] = None
    scaled_value: Optional[StrictInt] = None


class PerCoreCounters(_WireModel):
    core_number: StrictInt
    counters: List[CounterReading] = Field(alias="Performance_counter")


class TelemetryMetric(_WireModel):
    """
    A telemetry-solution metric. ``core`` and ``value`` are numbers encoded as
    strings on the wire; use ``core_label()`` and ``parsed_value()`` to read them.
    """
    core: Optional[StrictStr] = None
    metric_name: Optional[StrictStr] = None
    product_name: Optional[StrictStr] = None
    unit: Optional[StrictStr] = None
    value: Optional[StrictStr] = None

    def core_label(self) -> int:
        if self.core is None:
            raise NumericParseError("core", None)
        try:
            return int(self.core)
        except ValueError:
            raise NumericParseError("core", self.core) from None

    def parsed_value(self) -> float:
        if self.value is None:
            raise NumericParseError("value", None)
        try:
            return float(self.value)
        except ValueError:
            raise NumericParseError("value", self.value) from None


class TsMetric(_WireModel):
    telemetry_solution_metrics: Optional[List[TelemetryMetric]] = None


class CoreSection(_ClosedWireModel):
    kernel_mode: StrictBool
    multiplexing: StrictBool
    overall: Dict[str, Any]
    cores: List[PerCoreCounters]
    ts_metric: Optional[TsMetric] = None


class WperfStats(_WireModel):
    """One full capture: the count-file shape and each timeline item."""
    core: CoreSection
    dsu: Dict[str, Any]
    dmc: Dict[str, Any]
    time_elapsed: Optional[StrictFloat] = None

    @property
    def kernel_mode(self) -> bool:
        return self.core.kernel_mode

    @property
    def multiplexing(self) -> bool:
        return self.core.multiplexing

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time of this snapshot; absent counts as 0."""
        return self.time_elapsed or 0.0

    @property
    def core_counters(self) -> List[PerCoreCounters]:
        return self.core.cores

    @property
    def telemetry_metrics(self) -> List[TelemetryMetric]:
        ts_metric = self.core.ts_metric
        if ts_metric is None or ts_metric.telemetry_solution_metrics is None:
            return []
        return ts_metric.telemetry_solution_metrics


class WperfTimeline(_WireModel):
    """The timeline shape: ordered snapshots taken over successive windows."""
    timeline: List[WperfStats]


# Schema identities used as classification cache keys
SCHEMAS = {
    "wperf-timeline.stat": WperfTimeline,
    "wperf.stat": WperfStats,
}
TIMELINE_SCHEMA = "wperf-timeline.stat"
COUNT_SCHEMA = "wperf.stat"

"""
Projection of cooked event lists into pivot tables.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..cookers import WperfCountDataCooker, WperfTelemetryDataCooker, WperfTimelineDataCooker
from ..core.types import AnalyzerConfig, CookedEvent, EventKey, Timestamp, WperfEvent
from .table import PIVOT, SUM, Column, ColumnMetadata, RowFilter, Table, TableConfiguration

logger = logging.getLogger(__name__)

PLACEHOLDER_NAME = "#PLACEHOLDER"

GROUP_BY_CORE = "Group by core"
GROUP_BY_EVENT = "Group by event"


def _column(name: str, description: str, projection: Callable, aggregation: Optional[str] = None) -> Column:
    return Column(ColumnMetadata(name, description), projection, aggregation)


def counting_columns() -> List[Column]:
    return [
        _column("Core", "Core Number", lambda el: el.core_number),
        _column("Name", "Event Name", lambda el: el.name),
        _column("Value", "Value Number", lambda el: el.value, SUM),
        _column("Index", "Event Index", lambda el: el.index),
        _column("Note", "Event Note", lambda el: el.note),
    ]


def timestamp_columns() -> List[Column]:
    return [
        _column("Start", "Start Time", lambda el: el.relative_start),
        _column("End", "End Time", lambda el: el.relative_end),
    ]


def telemetry_columns() -> List[Column]:
    return [
        _column("Core", "Core Number", lambda el: el.core_number),
        _column("Name", "Event Name", lambda el: el.name),
        _column("Value", "Value Number", lambda el: el.value, SUM),
        _column("Unit", "Telemetry Unit", lambda el: el.unit),
        _column("Product Name", "Telemetry Product Name", lambda el: el.product_name),
    ] + timestamp_columns()


def _placeholder(key: EventKey, cooked: bool):
    event = WperfEvent(key=key, core_number=0, name=PLACEHOLDER_NAME, value=0.0)
    if cooked:
        return CookedEvent(event=event, relative_start=Timestamp(), relative_end=Timestamp())
    return event


class TableProjector:
    """
    Builds the combined and per-category tables for each cooker's output.

    Per-category tables are right-padded with placeholder rows up to the length
    of the unfiltered list, so sibling tables in one view share a row count;
    an initial filter hides the placeholders. Categories without matching
    events get no table.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()

    def pad_group(self, items: Sequence, category: str) -> Optional[List]:
        """
        Select the items of one category and pad them to ``len(items)``.

        Args:
            items: Full cooked list
            category: Note (counting) or unit (telemetry) to keep

        Returns:
            The filtered (and possibly padded) list, or None when no item matches
        """
        filtered = [item for item in items if item.category == category]
        if not filtered:
            return None
        if not self.config.pad_group_tables:
            return filtered

        cooked = isinstance(filtered[0], CookedEvent)
        padding = len(items) - len(filtered)
        return filtered + [_placeholder(filtered[0].key, cooked) for _ in range(padding)]

    def _combined_table(
        self,
        title: str,
        description: str,
        items: Sequence,
        columns: List[Column],
        detail_columns: List[str],
        column_roles: Optional[Dict[str, str]] = None
    ) -> Table:
        configurations = [
            TableConfiguration(
                GROUP_BY_CORE,
                ["Core", "Name", PIVOT] + detail_columns + ["Value"],
                column_roles=dict(column_roles or {}),
            ),
            TableConfiguration(
                GROUP_BY_EVENT,
                ["Name", "Core", PIVOT] + detail_columns + ["Value"],
                column_roles=dict(column_roles or {}),
            ),
        ]
        return Table(
            title=title,
            description=description,
            items=list(items),
            columns=columns,
            configurations=configurations,
            default_configuration=GROUP_BY_EVENT,
        )

    def _group_tables(
        self,
        title: str,
        items: Sequence,
        categories: Iterable[str],
        columns: Callable[[], List[Column]],
        detail_columns: List[str],
        column_roles: Optional[Dict[str, str]] = None
    ) -> List[Table]:
        tables = []
        for category in categories:
            group_items = self.pad_group(items, category)
            if group_items is None:
                continue
            row_filter = None
            if self.config.pad_group_tables:
                row_filter = RowFilter("Name", PLACEHOLDER_NAME, keep=False)
            configuration = TableConfiguration(
                category,
                ["Name", "Core", PIVOT] + detail_columns + ["Value"],
                initial_filter=row_filter,
                column_roles=dict(column_roles or {}),
            )
            tables.append(Table(
                title=category,
                description=f"{title} ({category})",
                items=group_items,
                columns=columns(),
                configurations=[configuration],
                default_configuration=category,
            ))
        return tables

    def build_counting_tables(self, events: Sequence[WperfEvent]) -> List[Table]:
        """Combined counting table plus one table per distinct event note."""
        notes = list(dict.fromkeys(event.note for event in events))
        combined = self._combined_table(
            "Counting",
            "Counting parsed from wperf JSON output",
            events,
            counting_columns(),
            ["Note"],
        )
        return [combined] + self._group_tables(
            "Counting", events, notes, counting_columns, ["Note"]
        )

    def build_timeline_tables(self, cooked: Sequence[CookedEvent]) -> List[Table]:
        """Combined timeline table plus one table per distinct event note."""
        notes = list(dict.fromkeys(event.note for event in cooked))
        roles = {'start_time': "Start", 'end_time': "End"}
        details = ["Note", "Start", "End"]
        combined = self._combined_table(
            "Counting timeline",
            "Counting timeline parsed from wperf JSON output",
            cooked,
            counting_columns() + timestamp_columns(),
            details,
            roles,
        )
        return [combined] + self._group_tables(
            "Counting timeline",
            cooked,
            notes,
            lambda: counting_columns() + timestamp_columns(),
            details,
            roles,
        )

    def build_telemetry_tables(self, cooked: Sequence[CookedEvent]) -> List[Table]:
        """Combined telemetry table plus one table per preset unit present in the data."""
        roles = {'start_time': "Start", 'end_time': "End"}
        details = ["Unit", "Product Name", "Start", "End"]
        combined = self._combined_table(
            "Telemetry",
            "Telemetry events parsed from wperf JSON output",
            cooked,
            telemetry_columns(),
            details,
            roles,
        )
        return [combined] + self._group_tables(
            "Telemetry",
            cooked,
            self.config.telemetry_presets,
            telemetry_columns,
            details,
            roles,
        )

    def build_tables(self, outputs: Dict[str, Sequence]) -> List[Table]:
        """
        Build every table for a run's cooker outputs. Cookers with no output
        produce no tables.

        Args:
            outputs: Dictionary mapping cooker_id -> cooked list

        Returns:
            List of tables: counting, timeline, then telemetry sets
        """
        builders = [
            (WperfCountDataCooker.cooker_id, self.build_counting_tables),
            (WperfTimelineDataCooker.cooker_id, self.build_timeline_tables),
            (WperfTelemetryDataCooker.cooker_id, self.build_telemetry_tables),
        ]
        tables = []
        for cooker_id, build in builders:
            items = outputs.get(cooker_id)
            if items:
                tables.extend(build(items))

        logger.info("Built %d tables", len(tables))
        return tables

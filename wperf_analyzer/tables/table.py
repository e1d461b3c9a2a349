"""
Pivot table model produced by the table projector.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..core.types import Timestamp

# Marks the split between group-by columns and the remaining columns
PIVOT = "|pivot|"

SUM = "sum"


@dataclass(frozen=True)
class ColumnMetadata:
    name: str
    description: str


@dataclass(frozen=True)
class Column:
    """A named projection from a row item to a cell value."""
    metadata: ColumnMetadata
    projection: Callable[[Any], Any]
    aggregation: Optional[str] = None

    @property
    def name(self) -> str:
        return self.metadata.name


@dataclass(frozen=True)
class RowFilter:
    """Initial filter: rows whose ``column`` equals ``value`` are hidden unless ``keep``."""
    column: str
    value: Any
    keep: bool = False

    def allows(self, row: Dict[str, Any]) -> bool:
        matches = row.get(self.column) == self.value
        return matches if self.keep else not matches


@dataclass
class TableConfiguration:
    """A named column layout of a table."""
    name: str
    columns: List[str]
    initial_filter: Optional[RowFilter] = None
    column_roles: Dict[str, str] = field(default_factory=dict)

    @property
    def group_columns(self) -> List[str]:
        if PIVOT not in self.columns:
            return []
        return self.columns[:self.columns.index(PIVOT)]

    @property
    def value_columns(self) -> List[str]:
        if PIVOT not in self.columns:
            return list(self.columns)
        return self.columns[self.columns.index(PIVOT) + 1:]

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'name': self.name,
            'columns': list(self.columns),
            'column_roles': dict(self.column_roles),
        }
        if self.initial_filter is not None:
            result['initial_filter'] = {
                'column': self.initial_filter.column,
                'value': self.initial_filter.value,
                'keep': self.initial_filter.keep,
            }
        return result


@dataclass
class Table:
    """
    A fixed-row-count table over a list of items. Every column projects each
    item to one cell; configurations choose the column order, the grouping
    and an optional initial filter.
    """
    title: str
    description: str
    items: Sequence[Any]
    columns: List[Column]
    configurations: List[TableConfiguration]
    default_configuration: str

    @property
    def row_count(self) -> int:
        return len(self.items)

    def column(self, name: str) -> Column:
        for column in self.columns:
            if column.name == name:
                return column
        raise KeyError(f"No column named {name!r} in table {self.title!r}")

    def configuration(self, name: Optional[str] = None) -> TableConfiguration:
        name = name or self.default_configuration
        for configuration in self.configurations:
            if configuration.name == name:
                return configuration
        raise KeyError(f"No configuration named {name!r} in table {self.title!r}")

    def column_values(self, name: str) -> List[Any]:
        projection = self.column(name).projection
        return [projection(item) for item in self.items]

    def rows(self) -> List[Dict[str, Any]]:
        """All rows, placeholders included."""
        return [
            {column.name: column.projection(item) for column in self.columns}
            for item in self.items
        ]

    def visible_rows(self, configuration: Optional[str] = None) -> List[Dict[str, Any]]:
        """Rows left after applying a configuration's initial filter."""
        row_filter = self.configuration(configuration).initial_filter
        rows = self.rows()
        if row_filter is None:
            return rows
        return [row for row in rows if row_filter.allows(row)]

    def pivot(self, configuration: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Group the visible rows by the columns left of the pivot marker and sum
        the summable columns. Groups keep the order of their first row.

        Args:
            configuration: Configuration name; defaults to the table's default

        Returns:
            One dictionary per group with the group-by values, summed values
            and a 'Count' of rows in the group
        """
        config = self.configuration(configuration)
        group_columns = config.group_columns
        sum_columns = [
            name for name in config.value_columns
            if name != PIVOT and self.column(name).aggregation == SUM
        ]

        groups: Dict[tuple, Dict[str, Any]] = {}
        for row in self.visible_rows(config.name):
            key = tuple(row[name] for name in group_columns)
            if key not in groups:
                groups[key] = {name: row[name] for name in group_columns}
                groups[key].update({name: 0 for name in sum_columns})
                groups[key]['Count'] = 0
            group = groups[key]
            for name in sum_columns:
                group[name] += row[name]
            group['Count'] += 1

        return list(groups.values())

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready description of the table, its layouts and its rows."""
        return {
            'title': self.title,
            'description': self.description,
            'row_count': self.row_count,
            'columns': [
                {
                    'name': column.name,
                    'description': column.metadata.description,
                    'aggregation': column.aggregation,
                }
                for column in self.columns
            ],
            'configurations': [config.to_dict() for config in self.configurations],
            'default_configuration': self.default_configuration,
            'rows': [
                {name: _jsonable(value) for name, value in row.items()}
                for row in self.rows()
            ],
        }


def _jsonable(value: Any) -> Any:
    if isinstance(value, Timestamp):
        return value.nanoseconds
    return value

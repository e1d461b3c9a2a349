"""Pivot table model and projection of cooked events."""

from .projector import GROUP_BY_CORE, GROUP_BY_EVENT, PLACEHOLDER_NAME, TableProjector
from .table import PIVOT, Column, ColumnMetadata, RowFilter, Table, TableConfiguration

__all__ = [
    "GROUP_BY_CORE",
    "GROUP_BY_EVENT",
    "PLACEHOLDER_NAME",
    "TableProjector",
    "PIVOT",
    "Column",
    "ColumnMetadata",
    "RowFilter",
    "Table",
    "TableConfiguration",
]

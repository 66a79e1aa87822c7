"""
Column schema for rendering Records as a table.

The schema records which top-level keys have been seen across all records,
the order they were first seen in, and how wide each column must be. Header
cells, column widths and row cells are all derived from the same ordered
column tuple so they always line up.

Usage:
    schema = TableSchema.build(source)
    header = schema.keys()
    widths = schema.widths()
    rows = [schema.row_cells(record) for record in source]
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from jlv.data_formats import Record

logger = logging.getLogger(__name__)

# Cell text for a value the encoder cannot walk.
TOO_DEEP = "<nested too deeply>"


def render_value(value: Any) -> str:
    """Render a JSON value as compact JSON text for a table cell.

    The same text is used both to display a cell and to measure its width.
    Values nested deeper than the encoder allows render as ``TOO_DEEP``.

    Args:
        value: A parsed JSON value.

    Returns:
        Compact JSON text.

    Examples:
        >>> render_value(1)
        '1'
        >>> render_value("x")
        '"x"'
        >>> render_value({"a": [1, 2]})
        '{"a":[1,2]}'
    """
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except RecursionError:
        logger.debug("Value too deeply nested to render as a cell")
        return TOO_DEEP


@dataclass(frozen=True)
class Column:
    """A single table column.

    Attributes:
        key: Top-level JSON object key shown in this column.
        order_index: Position of the column, assigned on first sighting.
        min_width: Widest rendered value or key name seen for this column.
    """

    key: str
    order_index: int
    min_width: int


class SchemaBuilder:
    """Accumulates column order and widths while scanning records.

    Keys are stored in a plain dict, whose insertion order is the order the
    keys were first seen, so the dict position is the column's order index.
    """

    def __init__(self) -> None:
        self._widths: dict[str, int] = {}

    def observe(self, record: Record) -> None:
        """Update the schema with one record.

        Records without an object value contribute nothing.

        Args:
            record: The record to scan.
        """
        obj = record.object_value
        if obj is None:
            return

        for key, value in obj.items():
            current = self._widths.setdefault(key, 0)
            self._widths[key] = max(current, len(render_value(value)), len(key))

    def observe_all(self, records: Iterable[Record]) -> SchemaBuilder:
        """Observe every record in order and return self."""
        for record in records:
            self.observe(record)
        return self

    def widths(self) -> dict[str, int]:
        """Return a snapshot of the current widths, keyed by column key."""
        return dict(self._widths)

    def freeze(self) -> TableSchema:
        """Build an immutable TableSchema from what has been observed."""
        return TableSchema(
            {
                key: Column(key=key, order_index=index, min_width=width)
                for index, (key, width) in enumerate(self._widths.items())
            }
        )


class TableSchema:
    """Immutable column layout for a set of records."""

    def __init__(self, columns: Mapping[str, Column]) -> None:
        """Initialize the schema.

        Args:
            columns: Mapping of key to Column. Order indexes must form a
                permutation of ``0..len(columns)-1``.

        Raises:
            ValueError: If the order indexes are not such a permutation.
        """
        self.columns: dict[str, Column] = dict(columns)
        self._ordered = tuple(sorted(self.columns.values(), key=lambda c: c.order_index))
        if [c.order_index for c in self._ordered] != list(range(len(self._ordered))):
            raise ValueError("Column order indexes must be 0..n-1 without gaps")

    @classmethod
    def build(cls, records: Iterable[Record]) -> TableSchema:
        """Scan records in source order and build their schema.

        Args:
            records: Records to scan.

        Returns:
            The frozen schema.
        """
        return SchemaBuilder().observe_all(records).freeze()

    def __len__(self) -> int:
        return len(self._ordered)

    def ordered_columns(self) -> tuple[Column, ...]:
        """Return columns sorted by order index.

        The tuple is computed once when the schema is created.
        """
        return self._ordered

    def keys(self) -> list[str]:
        """Return the column keys in column order (the header cells)."""
        return [column.key for column in self._ordered]

    def widths(self) -> list[int]:
        """Return the column widths in column order."""
        return [column.min_width for column in self._ordered]

    def row_cells(self, record: Record) -> list[str]:
        """Materialize one table row for a record.

        The row always has one cell per column, in column order. A record
        missing a key gets an empty cell for it, and a record without an
        object value gets an all-empty row.

        Args:
            record: The record to render.

        Returns:
            The rendered cells.
        """
        obj = record.object_value
        if obj is None:
            return ["" for _ in self._ordered]
        return [
            render_value(obj[column.key]) if column.key in obj else ""
            for column in self._ordered
        ]

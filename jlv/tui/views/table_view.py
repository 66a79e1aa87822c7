"""
Table view of a record source.

TableView holds the row cursor and the memoized column schema for a
RecordSource, and produces everything needed to paint the table. It does
no painting itself; see ``jlv.tui.widgets.record_table`` for that.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from jlv.config import DEFAULT_CONFIG, ViewerConfig
from jlv.data_formats import Record, RecordSource
from jlv.tui.mixins.vim_navigation import VimNavigationMixin
from jlv.tui.table_schema import TableSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableRender:
    """A fully materialized table.

    Attributes:
        header: Column keys in column order.
        widths: Column widths in column order.
        rows: One list of cells per record, each as long as ``header``.
        selected: Index of the highlighted row.
    """

    header: list[str]
    widths: list[int]
    rows: list[list[str]]
    selected: int


class TableView(VimNavigationMixin):
    """Row-per-record view with a clamped selection cursor."""

    def __init__(self, source: RecordSource, config: ViewerConfig = DEFAULT_CONFIG) -> None:
        """Initialize the table view.

        Args:
            source: Records to display.
            config: Viewer settings; ``initial_row`` sets the starting cursor.
        """
        self.source = source
        self._schema: TableSchema | None = None
        self.selection = self._clamp(config.initial_row)

    @property
    def record_count(self) -> int:
        """Return the number of records in the source."""
        return len(self.source)

    @property
    def schema(self) -> TableSchema:
        """Return the column schema, building it on first access."""
        if self._schema is None:
            self._schema = TableSchema.build(self.source)
            logger.debug("Built table schema with %d columns", len(self._schema))
        return self._schema

    def invalidate_schema(self) -> None:
        """Drop the cached schema so the next access rebuilds it."""
        self._schema = None

    def _clamp(self, row: int) -> int:
        return min(max(row, 0), max(0, self.record_count - 1))

    def move_down(self) -> None:
        """Move the cursor one row down, stopping at the last record."""
        self.selection = self._clamp(self.selection + 1)

    def move_up(self) -> None:
        """Move the cursor one row up, stopping at the first record."""
        self.selection = self._clamp(self.selection - 1)

    def move_to_first(self) -> None:
        self.selection = 0

    def move_to_last(self) -> None:
        self.selection = self._clamp(self.record_count - 1)

    def handle_key(self, key: str) -> None:
        """Handle a key forwarded by the Mux (row navigation only)."""
        self.handle_navigation_key(key)

    def selected_record(self) -> Record | None:
        """Return the record under the cursor, or None for an empty source.

        The returned object is the source's own Record, not a copy.
        """
        if self.record_count == 0:
            return None
        return self.source[self.selection]

    def render(self) -> TableRender:
        """Materialize the header, widths and rows from the schema.

        Returns:
            The table contents, all aligned to ``schema.ordered_columns()``.
        """
        schema = self.schema
        return TableRender(
            header=schema.keys(),
            widths=schema.widths(),
            rows=[schema.row_cells(record) for record in self.source],
            selected=self.selection,
        )

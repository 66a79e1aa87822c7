"""
DataTable Mixin for consistent table setup.

Provides reusable methods for:
- _configure_table(): Apply configuration and columns to a DataTable
- _text_cell(): Wrap a cell string so it is never parsed as markup

Usage:
    class MyTable(DataTableMixin, DataTable):
        def on_mount(self):
            self._configure_table(self, [
                ("Name", 30),
                ("Value", 20),
            ])
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import DataTable


class DataTableMixin:
    """Mixin providing consistent DataTable configuration."""

    def _configure_table(
        self,
        table: DataTable,
        columns: list[tuple[str, int | None]],
        *,
        cursor_type: str = "row",
        zebra_stripes: bool = True,
    ) -> None:
        """Set up a record table's columns from a schema.

        Each column is keyed by its JSON key, so keys are unique. Labels are
        plain Rich text, so keys such as ``[x]`` are never read as markup.
        Widths below 1 are raised to 1.

        Args:
            table: The DataTable instance to configure.
            columns: (JSON key, schema width) pairs in column order. Width
                can be None to let the table size the column.
            cursor_type: Cursor type ('row', 'cell', or 'none').
            zebra_stripes: Whether to enable zebra striping.
        """
        table.cursor_type = cursor_type
        table.zebra_stripes = zebra_stripes
        for name, width in columns:
            if width is not None:
                width = max(width, 1)
            table.add_column(Text(name, style="bold"), width=width, key=name)

    def _text_cell(self, value: str) -> Text:
        """Wrap a rendered value as a single-line, non-markup cell."""
        return Text(value, no_wrap=True, overflow="ellipsis")

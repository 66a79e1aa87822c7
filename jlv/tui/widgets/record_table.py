"""
RecordTable widget for painting a TableView.

The table is built once from ``TableView.render()``. Key handling stays in
the TableView; this widget only mirrors its cursor.
"""

from __future__ import annotations

from textual.widgets import DataTable

from jlv.tui.mixins.data_table import DataTableMixin
from jlv.tui.views.table_view import TableView


class RecordTable(DataTableMixin, DataTable):
    """DataTable showing one row per record and one column per key."""

    DEFAULT_CSS = """
    RecordTable {
        height: 1fr;
    }

    RecordTable > .datatable--header {
        background: $primary;
        color: $text;
        text-style: bold;
    }

    RecordTable > .datatable--cursor {
        background: $secondary;
        color: $text;
    }
    """

    # Keys reach the table through the Mux, never directly.
    can_focus = False

    def __init__(
        self,
        table_view: TableView,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the record table.

        Args:
            table_view: The view whose rows and cursor are painted.
            name: Optional name for the widget.
            id: Optional ID for the widget.
            classes: Optional CSS classes.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.table_view = table_view

    def on_mount(self) -> None:
        """Populate the table when mounted."""
        self.populate()

    def populate(self) -> None:
        """Rebuild columns and rows from the table view."""
        contents = self.table_view.render()

        self.clear(columns=True)
        self._configure_table(self, list(zip(contents.header, contents.widths)))

        # With no columns there is nothing to draw in a row.
        if contents.header:
            for idx, row in enumerate(contents.rows):
                self.add_row(*(self._text_cell(cell) for cell in row), key=str(idx))

        self.sync_cursor()

    def sync_cursor(self) -> None:
        """Move the highlighted row to the table view's selection."""
        if self.row_count > 0:
            self.move_cursor(row=self.table_view.selection)

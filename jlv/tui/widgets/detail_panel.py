"""
DetailPanel widget for painting a DetailView.
"""

from __future__ import annotations

from rich.highlighter import JSONHighlighter
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from jlv.tui.views.detail_view import DetailView


class DetailPanel(VerticalScroll):
    """Scrollable, highlighted JSON for one record."""

    DEFAULT_CSS = """
    DetailPanel {
        height: 1fr;
        padding: 0 1;
        border: solid $primary;
    }

    DetailPanel .parse-error {
        color: $error;
        text-style: bold;
    }

    DetailPanel .raw-line {
        color: $text-muted;
        margin-bottom: 1;
    }
    """

    can_focus = False

    def __init__(
        self,
        detail_view: DetailView,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the detail panel.

        Args:
            detail_view: The view to paint.
            name: Optional name for the widget.
            id: Optional ID for the widget.
            classes: Optional CSS classes.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.detail_view = detail_view

    def compose(self) -> ComposeResult:
        """Compose the panel content."""
        record = self.detail_view.record
        self.border_title = f"Record {record.seq_no}"

        if not record.has_value:
            yield Static(
                Text(f"Line {record.seq_no} is not valid JSON: {record.parse_error}"),
                classes="parse-error",
            )
            yield Static(Text(record.raw), classes="raw-line")

        highlighter = JSONHighlighter()
        yield Static(highlighter(Text(self.detail_view.render())), classes="detail-json")

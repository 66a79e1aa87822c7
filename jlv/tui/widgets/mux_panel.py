"""
MuxPanel widget for painting the Mux.

MuxPanel is the only focusable widget in the viewer. Every key press that
is not an app binding lands here, goes to ``Mux.handle_key`` and the panel
then brings its children in line with the Mux state: one DetailPanel per
open tab, only the active view displayed, the table cursor on the selected
row and the tab strip repainted.
"""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Container
from textual.widget import Widget

from jlv.tui.views.detail_view import DetailView
from jlv.tui.views.mux import Mux, TabFocus
from jlv.tui.widgets.detail_panel import DetailPanel
from jlv.tui.widgets.record_table import RecordTable
from jlv.tui.widgets.tab_strip import TabStrip

TABLE_PANEL_ID = "table"


def panel_id(tab: DetailView) -> str:
    """Return the widget ID used for a detail tab's panel."""
    return f"detail-{tab.tab_id}"


class MuxPanel(Widget, can_focus=True):
    """Tab strip plus the active view of a Mux."""

    DEFAULT_CSS = """
    MuxPanel {
        height: 1fr;
        layout: vertical;
    }

    MuxPanel > #mux-body {
        height: 1fr;
    }
    """

    def __init__(
        self,
        mux: Mux,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the panel.

        Args:
            mux: The state machine to paint and feed keys to.
            name: Optional name for the widget.
            id: Optional ID for the widget.
            classes: Optional CSS classes.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.mux = mux

    def compose(self) -> ComposeResult:
        """Compose the tab strip and the view area."""
        yield TabStrip(id="tab-strip")
        with Container(id="mux-body"):
            yield RecordTable(self.mux.table_view, id=TABLE_PANEL_ID)

    def on_mount(self) -> None:
        """Paint the initial tab strip."""
        self._refresh_tab_strip()

    async def on_key(self, event: events.Key) -> None:
        """Feed the key to the Mux and resync the children."""
        event.stop()
        self.mux.handle_key(event.key)
        await self.sync()

    async def sync(self) -> None:
        """Bring the child widgets in line with the Mux state."""
        body = self.query_one("#mux-body", Container)
        wanted = {panel_id(tab): tab for tab in self.mux.tabs}

        for panel in [child for child in body.children if isinstance(child, DetailPanel)]:
            if panel.id not in wanted:
                await panel.remove()

        existing = {child.id for child in body.children}
        for tab_panel_id, tab in wanted.items():
            if tab_panel_id not in existing:
                await body.mount(DetailPanel(tab, id=tab_panel_id))

        if isinstance(self.mux.focus, TabFocus):
            active_id = panel_id(self.mux.tabs[self.mux.focus.index])
        else:
            active_id = TABLE_PANEL_ID
        for child in body.children:
            child.display = child.id == active_id

        self.query_one(RecordTable).sync_cursor()
        self._refresh_tab_strip()

    def _refresh_tab_strip(self) -> None:
        self.query_one(TabStrip).show_tabs(
            self.mux.tab_labels(),
            self.mux.active_label_index,
            self.mux.config.keymap.hints(),
        )

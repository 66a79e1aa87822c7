"""
Mux - the view multiplexer.

The Mux composes one TableView with any number of DetailView tabs. It owns
which view is active and routes key presses either to its own tab
navigation or to the active view.

States:
    TableFocus       the table is active
    TabFocus(index)  detail tab ``index`` is active

Transitions, checked in this order:
    confirm on the table   open a tab for the selected record and focus it
    confirm on a tab       close it and focus the tab before it (or the table)
    next tab               focus one tab to the right, stopping at the last
    previous tab           focus one tab to the left, stopping at the table
    home                   focus the table
    any other key          forwarded to the active view
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Union

from jlv.config import DEFAULT_CONFIG, ViewerConfig
from jlv.tui.views.detail_view import DetailView
from jlv.tui.views.table_view import TableView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableFocus:
    """The table view is active."""

    @property
    def index(self) -> int:
        return -1


@dataclass(frozen=True)
class TabFocus:
    """A detail tab is active.

    Attributes:
        index: Position of the active tab in ``Mux.tabs``.
    """

    index: int


Focus = Union[TableFocus, TabFocus]

TABLE = TableFocus()


class Mux:
    """Navigation state machine over a table and its detail tabs."""

    def __init__(self, table_view: TableView, config: ViewerConfig = DEFAULT_CONFIG) -> None:
        """Initialize the Mux on the table.

        Args:
            table_view: The table every detail tab is opened from.
            config: Viewer settings (key bindings, labels, indent).
        """
        self.table_view = table_view
        self.config = config
        self.tabs: list[DetailView] = []
        self.focus: Focus = TABLE
        self._tab_ids = itertools.count()

    @property
    def focus_index(self) -> int:
        """Return -1 when the table is active, else the active tab index."""
        return self.focus.index

    def _set_focus(self, index: int) -> None:
        """Focus ``index``, clamped into ``[-1, len(tabs) - 1]``."""
        index = min(index, len(self.tabs) - 1)
        self.focus = TabFocus(index) if index >= 0 else TABLE

    @property
    def active_view(self) -> TableView | DetailView:
        """Return the view that should be drawn."""
        if isinstance(self.focus, TabFocus):
            return self.tabs[self.focus.index]
        return self.table_view

    def open_selected(self) -> DetailView | None:
        """Open a detail tab for the table's selected record and focus it.

        Returns:
            The new tab, or None if the table has no records.
        """
        record = self.table_view.selected_record()
        if record is None:
            return None

        tab = DetailView(record, tab_id=next(self._tab_ids), indent=self.config.detail_indent)
        self.tabs.append(tab)
        self._set_focus(len(self.tabs) - 1)
        logger.debug("Opened tab %s for record %d", tab.tab_id, record.seq_no)
        return tab

    def close_focused(self) -> DetailView | None:
        """Close the active tab and focus the one before it.

        Closing the first tab returns to the table. Does nothing when the
        table is active.

        Returns:
            The closed tab, or None if nothing was closed.
        """
        if not isinstance(self.focus, TabFocus) or not self.tabs:
            return None

        index = self.focus.index
        tab = self.tabs.pop(index)
        self._set_focus(index - 1)
        logger.debug("Closed tab %s", tab.tab_id)
        return tab

    def confirm(self) -> None:
        """Open a tab from the table, or close the active tab."""
        if isinstance(self.focus, TabFocus):
            self.close_focused()
        else:
            self.open_selected()

    def next_tab(self) -> None:
        self._set_focus(self.focus_index + 1)

    def prev_tab(self) -> None:
        self._set_focus(max(self.focus_index - 1, -1))

    def home(self) -> None:
        self.focus = TABLE

    def handle_key(self, key: str) -> None:
        """Dispatch one key press.

        Args:
            key: Textual key name (e.g. ``enter``, ``right``, ``j``).
        """
        keymap = self.config.keymap
        if key in keymap.confirm:
            self.confirm()
        elif key in keymap.next_tab:
            self.next_tab()
        elif key in keymap.prev_tab:
            self.prev_tab()
        elif key in keymap.home:
            self.home()
        else:
            self.active_view.handle_key(key)

    def tab_labels(self) -> list[str]:
        """Return the tab strip labels: the table first, then each tab."""
        return [self.config.table_label] + [tab.label for tab in self.tabs]

    @property
    def active_label_index(self) -> int:
        """Return the position of the active entry in ``tab_labels()``."""
        return self.focus_index + 1

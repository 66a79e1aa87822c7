"""Views for the JSONL viewer: the table, detail tabs and the Mux over them."""

from jlv.tui.views.detail_view import DetailView
from jlv.tui.views.mux import TABLE, Focus, Mux, TabFocus, TableFocus
from jlv.tui.views.table_view import TableRender, TableView

__all__ = [
    "DetailView",
    "Focus",
    "Mux",
    "TABLE",
    "TabFocus",
    "TableFocus",
    "TableRender",
    "TableView",
]

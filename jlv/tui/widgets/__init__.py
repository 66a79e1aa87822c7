"""TUI widgets for the JSONL viewer."""

from jlv.tui.widgets.detail_panel import DetailPanel
from jlv.tui.widgets.mux_panel import MuxPanel
from jlv.tui.widgets.record_table import RecordTable
from jlv.tui.widgets.tab_strip import TabStrip, build_tab_strip

__all__ = [
    "DetailPanel",
    "MuxPanel",
    "RecordTable",
    "TabStrip",
    "build_tab_strip",
]

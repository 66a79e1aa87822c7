"""
Textual user interface for the JSONL viewer.

Components:
    - JlvApp: Main application class (jlv.tui.app)
    - TableView, DetailView, Mux: View state and navigation (jlv.tui.views)
    - RecordTable, DetailPanel, TabStrip, MuxPanel: Widgets (jlv.tui.widgets)
    - TableSchema: Column layout (jlv.tui.table_schema)
"""

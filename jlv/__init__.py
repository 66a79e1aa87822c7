"""
jlv - a terminal viewer for JSONL files.

Each line of the file becomes a record. Records are shown as a table with
one column per top-level key, and any record can be opened in its own
detail tab as pretty-printed JSON.

Components:
    - FileRecordSource: Loads a JSONL file into Records
    - TableSchema: Column order and widths across all records
    - TableView / DetailView: What the table and a detail tab show
    - Mux: Switches between the table and open detail tabs
    - JlvApp: The Textual application
"""

__version__ = "0.1.0"

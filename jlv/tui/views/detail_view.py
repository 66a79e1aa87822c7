"""
Detail view of a single record.
"""

from __future__ import annotations

import json

from jlv.data_formats import Record


class DetailView:
    """Pretty-printed view of one Record.

    Attributes:
        record: The record shown (shared with the source, never copied).
        tab_id: Identifier assigned by the Mux, unique within a session.
        indent: Indentation for the pretty-printed JSON.
    """

    def __init__(self, record: Record, tab_id: int = 0, indent: int = 2) -> None:
        self.record = record
        self.tab_id = tab_id
        self.indent = indent

    @property
    def label(self) -> str:
        """Return the tab strip label, e.g. ``#3``."""
        return f"#{self.record.seq_no}"

    def render(self) -> str:
        """Return the record value as indented JSON.

        A record whose line was not valid JSON renders as ``null``. A value
        nested too deeply to encode falls back to the raw line.
        """
        value = self.record.value if self.record.has_value else None
        try:
            return json.dumps(value, indent=self.indent, ensure_ascii=False)
        except RecursionError:
            return self.record.raw

    def handle_key(self, key: str) -> None:
        """Accept and ignore input; a detail view has nothing to navigate."""

"""Tests for DetailView in jlv/tui/views/detail_view.py."""

from __future__ import annotations

import json

from jlv.data_formats import Record
from jlv.tui.views import DetailView


class TestDetailViewRender:
    """Tests for pretty-printing a record."""

    def test_pretty_prints_object(self, record):
        """Objects are rendered as indented JSON."""
        text = DetailView(record).render()
        assert text == json.dumps(record.value, indent=2)
        assert "\n" in text

    def test_custom_indent(self, record):
        """The indent is configurable."""
        text = DetailView(record, indent=4).render()
        assert '\n    "name"' in text

    def test_invalid_line_renders_null(self):
        """A record without a value renders as null."""
        text = DetailView(Record.from_line(0, "garbage")).render()
        assert text == "null"

    def test_unicode_kept(self):
        """Non-ASCII text is not escaped."""
        text = DetailView(Record.from_line(0, '{"k": "ünïcode"}')).render()
        assert "ünïcode" in text

    def test_too_deep_value_falls_back_to_raw(self, deep_value):
        """A value the encoder cannot walk is shown as its raw line."""
        record = Record(seq_no=0, raw="[[[...]]]", value=deep_value)
        assert DetailView(record).render() == "[[[...]]]"


class TestDetailViewLabel:
    """Tests for the tab label."""

    def test_label_uses_seq_no(self):
        """Labels name the record's line number."""
        view = DetailView(Record.from_line(7, "{}"))
        assert view.label == "#7"


class TestDetailViewKeys:
    """A detail view ignores input."""

    def test_handle_key_is_noop(self, record):
        """Keys leave the view unchanged."""
        view = DetailView(record)
        before = view.render()
        view.handle_key("down")
        view.handle_key("x")
        assert view.render() == before
        assert view.record is record

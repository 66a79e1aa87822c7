"""Tests for the Record type in jlv/data_formats/record.py."""

from __future__ import annotations

import dataclasses

import pytest

from jlv.data_formats import Record


class TestRecordFromLine:
    """Tests for Record.from_line parsing."""

    def test_parses_object(self):
        """A JSON object line should produce a dict value."""
        record = Record.from_line(0, '{"a": 1, "b": "x"}')
        assert record.value == {"a": 1, "b": "x"}
        assert record.has_value
        assert record.parse_error is None

    def test_keeps_raw_text(self):
        """The raw line should be stored exactly as given."""
        line = '{"a" :  1}'
        record = Record.from_line(4, line)
        assert record.raw == line
        assert record.seq_no == 4

    def test_invalid_json_has_no_value(self):
        """A line that is not JSON should become a record without a value."""
        record = Record.from_line(2, "not json at all")
        assert record.value is None
        assert not record.has_value
        assert record.parse_error

    def test_blank_line_has_no_value(self):
        """An empty line is not valid JSON."""
        record = Record.from_line(0, "")
        assert not record.has_value

    def test_json_null_is_a_value(self):
        """The literal null is valid JSON and counts as a value."""
        record = Record.from_line(0, "null")
        assert record.has_value
        assert record.value is None

    def test_scalar_and_array_values(self):
        """Non-object JSON values should still parse."""
        assert Record.from_line(0, "42").value == 42
        assert Record.from_line(1, "[1, 2]").value == [1, 2]

    def test_deeply_nested_line_is_a_parse_failure(self):
        """A line nested past the decoder limit is kept without a value."""
        line = "[" * 100000 + "]" * 100000
        record = Record.from_line(3, line)
        assert not record.has_value
        assert record.value is None
        assert record.parse_error
        assert record.raw == line


class TestRecordObjectValue:
    """Tests for Record.object_value."""

    def test_object(self):
        """Objects are returned as-is."""
        record = Record.from_line(0, '{"k": 1}')
        assert record.object_value == {"k": 1}

    @pytest.mark.parametrize("line", ["[1, 2]", '"text"', "3", "null", "nope"])
    def test_non_object(self, line):
        """Anything other than an object yields None."""
        assert Record.from_line(0, line).object_value is None


class TestRecordImmutability:
    """Records must not change after creation."""

    def test_frozen(self, record):
        """Assigning a field should raise."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.raw = "changed"

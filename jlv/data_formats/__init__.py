"""
Data formats module for loading JSONL records.

This module provides the Record type and the RecordSource interface, plus the
file-backed implementation used by the viewer.

Usage:
    from jlv.data_formats import FileRecordSource

    source = FileRecordSource.open("data.jsonl")
    for record in source:
        print(record.seq_no, record.value)
"""

from jlv.data_formats.base import RecordSource, SourceLoadError
from jlv.data_formats.jsonl_source import (
    FileRecordSource,
    records_from_lines,
    split_lines,
)
from jlv.data_formats.record import Record

__all__ = [
    # Base class
    "RecordSource",
    "SourceLoadError",
    # Records
    "Record",
    # Sources
    "FileRecordSource",
    "records_from_lines",
    "split_lines",
]

"""
JSONL file record source.

This module provides the FileRecordSource class, which loads every line of a
JSONL (JSON Lines) file into a Record.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, Sequence

from jlv.data_formats.base import RecordSource, SourceLoadError
from jlv.data_formats.record import Record

logger = logging.getLogger(__name__)


def split_lines(lines: Iterable[str]) -> Iterator[str]:
    """Strip the line terminator from each line.

    Args:
        lines: Lines as produced by iterating a text file.

    Yields:
        Each line without its trailing newline or carriage return.
    """
    for line in lines:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def records_from_lines(lines: Iterable[str]) -> list[Record]:
    """Build Records from raw lines, numbering them from zero.

    Args:
        lines: Raw lines with terminators already removed.

    Returns:
        One Record per line, blank lines included.
    """
    return [Record.from_line(i, line) for i, line in enumerate(lines)]


class FileRecordSource(RecordSource):
    """Record source backed by a JSONL file.

    The whole file is read once at construction; nothing is re-read while
    the viewer runs.

    Attributes:
        filename: Path of the loaded file.
    """

    def __init__(self, filename: str, records: Sequence[Record]) -> None:
        """Initialize the source with already loaded records.

        Args:
            filename: Path of the file the records came from.
            records: Records in file order.
        """
        self.filename = filename
        self._records = tuple(records)

    @property
    def title(self) -> str:
        """Return the file's base name."""
        return os.path.basename(self.filename)

    @property
    def records(self) -> Sequence[Record]:
        """Return all records in file order."""
        return self._records

    @classmethod
    def open(cls, filename: str) -> FileRecordSource:
        """Load a JSONL file.

        Lines that are not valid JSON still become Records (without a value).

        Args:
            filename: Path to the JSONL file.

        Returns:
            A FileRecordSource holding one Record per line.

        Raises:
            SourceLoadError: If the file cannot be read or is not UTF-8 text.

        Examples:
            >>> source = FileRecordSource.open("data.jsonl")
            >>> print(f"Loaded {len(source)} records")
        """
        try:
            with open(filename, "r", encoding="utf-8") as f:
                records = records_from_lines(split_lines(f))
        except (OSError, UnicodeDecodeError) as e:
            raise SourceLoadError(f"Cannot read {filename}: {e}") from e

        source = cls(filename, records)
        logger.info(
            "Opened %s: %d records, %d not valid JSON",
            filename,
            len(source),
            source.parse_failures,
        )
        return source

"""
Abstract base class for record sources.

This module defines the RecordSource interface that every source of
Records (files today, streams later) must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Sequence

from jlv.data_formats.record import Record


class SourceLoadError(Exception):
    """Raised when a source cannot be opened or read."""


class RecordSource(ABC):
    """Ordered, read-only collection of Records with a display title.

    Implementations must keep ``records[i].seq_no == i`` and must not change
    their records after construction.
    """

    @property
    @abstractmethod
    def title(self) -> str:
        """Return the display title (e.g., the file name)."""
        pass

    @property
    @abstractmethod
    def records(self) -> Sequence[Record]:
        """Return all records in source order."""
        pass

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]

    @property
    def parse_failures(self) -> int:
        """Return the number of records whose line was not valid JSON."""
        return sum(1 for record in self.records if not record.has_value)

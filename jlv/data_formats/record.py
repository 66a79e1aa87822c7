"""
Record type for JSONL viewing.

A Record is one line of an input file: its position, the exact text of the
line and, when the line is valid JSON, the parsed value.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Record:
    """One line of a JSONL source.

    Attributes:
        seq_no: Zero-based position of the line in its source.
        raw: The line text without its trailing newline.
        value: The parsed JSON value, or None if the line did not parse.
        parse_error: The decoder message when the line did not parse.
    """

    seq_no: int
    raw: str
    value: Any = None
    parse_error: str | None = None

    @property
    def has_value(self) -> bool:
        """Whether the raw line was valid JSON.

        A line holding the literal ``null`` has a value (JSON null), so this
        is tracked through ``parse_error`` rather than ``value``.
        """
        return self.parse_error is None

    @property
    def object_value(self) -> dict[str, Any] | None:
        """Return the parsed value if it is a JSON object, else None."""
        if self.has_value and isinstance(self.value, dict):
            return self.value
        return None

    @classmethod
    def from_line(cls, seq_no: int, line: str) -> Record:
        """Build a Record from a single input line.

        Parse failures are recorded on the Record instead of being raised,
        so one bad line never stops the rest of a file from loading. That
        includes lines nested too deeply for the decoder.

        Args:
            seq_no: Zero-based position of the line.
            line: The line text, already stripped of its newline.

        Returns:
            A new Record.

        Examples:
            >>> Record.from_line(0, '{"a": 1}').value
            {'a': 1}
            >>> Record.from_line(1, 'not json').has_value
            False
        """
        try:
            value = json.loads(line)
        except (ValueError, RecursionError) as e:
            logger.debug("Line %d is not valid JSON: %s", seq_no, e)
            return cls(seq_no=seq_no, raw=line, value=None, parse_error=str(e))
        return cls(seq_no=seq_no, raw=line, value=value)

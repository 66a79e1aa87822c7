"""Pytest configuration and shared fixtures for jlv tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from jlv.data_formats import FileRecordSource, Record, records_from_lines


class ListRecordSource(FileRecordSource):
    """In-memory source built from lines, for tests that need no file."""

    def __init__(self, lines: list[str], title: str = "memory.jsonl") -> None:
        super().__init__(title, records_from_lines(lines))


def write_jsonl(path: Path, records: list[Any]) -> None:
    """Helper to write values to a JSONL file, one per line."""
    with open(path, "w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")


@pytest.fixture
def make_source() -> Callable[..., ListRecordSource]:
    """Return a factory building an in-memory source from raw lines."""

    def factory(*lines: str) -> ListRecordSource:
        return ListRecordSource(list(lines))

    return factory


@pytest.fixture
def scenario_a_lines() -> list[str]:
    """Two objects with overlapping keys."""
    return ['{"a":1,"b":2}', '{"b":3,"c":4}']


@pytest.fixture
def scenario_source(scenario_a_lines) -> ListRecordSource:
    """Scenario A lines followed by one line that is not JSON."""
    return ListRecordSource(scenario_a_lines + ["this is not json"])


@pytest.fixture
def jsonl_file(tmp_path) -> Path:
    """Create a small JSONL file with heterogeneous records."""
    path = tmp_path / "events.jsonl"
    write_jsonl(
        path,
        [
            {"level": "info", "msg": "started"},
            {"level": "warn", "msg": "slow", "ms": 1200},
            {"msg": "done", "extra": {"ok": True}},
        ],
    )
    return path


@pytest.fixture
def record() -> Record:
    """Return a simple parsed record."""
    return Record.from_line(0, '{"name": "jlv", "tags": ["a", "b"]}')


@pytest.fixture
def deep_value() -> list:
    """Return a list nested deeper than the JSON encoder can walk."""
    value: list = []
    for _ in range(100000):
        value = [value]
    return value

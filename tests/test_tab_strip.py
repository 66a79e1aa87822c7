"""Tests for the tab strip text in jlv/tui/widgets/tab_strip.py."""

from __future__ import annotations

from jlv.config import DEFAULT_KEYMAP, KeyMap
from jlv.tui.widgets.tab_strip import ACTIVE_STYLE, build_tab_strip


def styled_segments(text, style: str) -> list[str]:
    """Return the substrings of ``text`` carrying ``style``."""
    return [text.plain[span.start:span.end] for span in text.spans if str(span.style) == style]


class TestBuildTabStrip:
    """Tests for build_tab_strip."""

    def test_contains_every_label(self):
        """All labels appear in order."""
        text = build_tab_strip(["Table", "#0", "#3"], 0, [])
        plain = text.plain
        assert plain.index("Table") < plain.index("#0") < plain.index("#3")

    def test_marks_active_label(self):
        """Only the active label carries the active style."""
        text = build_tab_strip(["Table", "#0", "#3"], 2, [])
        assert styled_segments(text, ACTIVE_STYLE) == [" #3 "]

    def test_table_active(self):
        """Index 0 marks the table."""
        text = build_tab_strip(["Table"], 0, [])
        assert styled_segments(text, ACTIVE_STYLE) == [" Table "]

    def test_hints_shown(self):
        """Key hints follow the labels."""
        text = build_tab_strip(["Table"], 0, DEFAULT_KEYMAP.hints())
        assert "enter" in text.plain
        assert "open/close" in text.plain
        assert "quit" in text.plain


class TestKeyMapHints:
    """Tests for KeyMap.hints."""

    def test_hints_join_keys(self):
        """Multiple keys for one action are joined with '/'."""
        hints = dict((desc, keys) for keys, desc in KeyMap(home=("home", "t")).hints())
        assert hints["table"] == "home/t"

"""
TabStrip widget showing open views and key hints.
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

ACTIVE_STYLE = "bold reverse"
INACTIVE_STYLE = "dim"
SEPARATOR = " · "


def build_tab_strip(labels: list[str], active: int, hints: list[tuple[str, str]]) -> Text:
    """Build the tab strip text.

    Args:
        labels: Tab labels, the table first.
        active: Index into ``labels`` of the active entry.
        hints: (keys, description) pairs shown after the labels.

    Returns:
        Styled text, e.g. `` Table · #3 ·   enter open/close ...``.
    """
    text = Text()
    for i, label in enumerate(labels):
        if i:
            text.append(SEPARATOR)
        text.append(f" {label} ", style=ACTIVE_STYLE if i == active else INACTIVE_STYLE)

    if hints:
        text.append("   ")
        for i, (keys, description) in enumerate(hints):
            if i:
                text.append("  ")
            text.append(keys, style="bold")
            text.append(f" {description}", style="dim")
    return text


class TabStrip(Static):
    """One-line strip of tab labels with the active one highlighted."""

    DEFAULT_CSS = """
    TabStrip {
        height: 1;
        padding: 0 1;
        background: $primary-background;
    }
    """

    def show_tabs(self, labels: list[str], active: int, hints: list[tuple[str, str]]) -> None:
        """Repaint the strip."""
        self.update(build_tab_strip(labels, active, hints))

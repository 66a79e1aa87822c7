"""
Viewer configuration.

Key bindings and view defaults live here as frozen dataclasses. There is no
config file; the CLI builds a ViewerConfig from its flags.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class KeyMap:
    """Textual key names for each navigation action.

    Attributes:
        confirm: Open a detail tab from the table, or close the current tab.
        next_tab: Move focus one tab to the right.
        prev_tab: Move focus one tab to the left (towards the table).
        home: Jump straight back to the table.
        quit: Exit the application from any view.
    """

    confirm: tuple[str, ...] = ("enter",)
    next_tab: tuple[str, ...] = ("right", "l")
    prev_tab: tuple[str, ...] = ("left", "h")
    home: tuple[str, ...] = ("home", "t")
    quit: tuple[str, ...] = ("q", "Q")

    def hints(self) -> list[tuple[str, str]]:
        """Return (keys, description) pairs for the tab strip.

        Returns:
            One pair per action, keys joined with '/'.
        """
        return [
            ("/".join(self.confirm), "open/close"),
            ("/".join(self.prev_tab + self.next_tab), "tabs"),
            ("/".join(self.home), "table"),
            ("/".join(self.quit), "quit"),
        ]


DEFAULT_KEYMAP = KeyMap()


@dataclass(frozen=True)
class ViewerConfig:
    """Settings for one viewing session.

    Attributes:
        initial_row: Row the table cursor starts on (clamped to the data).
        detail_indent: Indentation used when pretty-printing a record.
        table_label: Tab strip label for the table view.
        keymap: Key bindings.
        debug: Whether debug logging is enabled.
    """

    initial_row: int = 0
    detail_indent: int = 2
    table_label: str = "Table"
    keymap: KeyMap = field(default_factory=KeyMap)
    debug: bool = False


DEFAULT_CONFIG = ViewerConfig()

"""Mixins for the TUI application."""

from jlv.tui.mixins.data_table import DataTableMixin
from jlv.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "DataTableMixin",
    "VimNavigationMixin",
]

"""
Main Textual application for the JSONL viewer.

This is the entry point for the TUI that shows a JSONL file as a table, one
row per line, with detail tabs for individual records.

Usage:
    jlv data.jsonl
    jlv -f data.jsonl --debug
    python -m jlv data.jsonl
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from jlv import __version__
from jlv.config import DEFAULT_CONFIG, DEFAULT_KEYMAP, ViewerConfig
from jlv.data_formats import FileRecordSource, RecordSource, SourceLoadError
from jlv.logging_config import DEFAULT_LOG_FILE, setup_logging
from jlv.tui.views.mux import Mux
from jlv.tui.views.table_view import TableView
from jlv.tui.widgets.mux_panel import MuxPanel

logger = logging.getLogger(__name__)


class JlvApp(App):
    """A Textual app for viewing the records of a JSONL source."""

    TITLE = "jlv"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
    }

    Footer {
        dock: bottom;
    }

    #mux {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding(",".join(DEFAULT_KEYMAP.quit), "quit", "Quit", show=True, priority=True),
    ]

    def __init__(self, source: RecordSource, config: ViewerConfig = DEFAULT_CONFIG):
        """Initialize the app with a loaded record source.

        Args:
            source: The records to view.
            config: Viewer settings.
        """
        super().__init__()
        self.source = source
        self.config = config
        self.table_view = TableView(source, config)
        self.mux = Mux(self.table_view, config)

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        yield Header()
        yield MuxPanel(self.mux, id="mux")
        yield Footer()

    def on_mount(self) -> None:
        """Set titles and give the Mux keyboard focus."""
        self.title = f"jlv - {self.source.title}"
        self.sub_title = f"{len(self.source):,} records"
        if self.source.parse_failures:
            self.sub_title += f", {self.source.parse_failures:,} not valid JSON"
        if self.config.debug:
            self.sub_title += ", debug"
        self.query_one(MuxPanel).focus()


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="jlv",
        description="JsonL viewer: browse a JSONL file as a table, one row per line.",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        metavar="FILENAME",
        help="Path to the JSONL file to view",
    )
    parser.add_argument(
        "-f",
        "--filename",
        dest="filename_flag",
        metavar="FILENAME",
        default=None,
        help="Path to the JSONL file to view (alternative to the positional argument)",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help=f"Enable debug logging to {DEFAULT_LOG_FILE}",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_source(filename: str) -> RecordSource:
    """Open the source, exiting with an error message if it cannot be read.

    Args:
        filename: Path given on the command line.

    Returns:
        The loaded record source.
    """
    if not os.path.exists(filename):
        print(f"Error: Path not found: {filename}", file=sys.stderr)
        sys.exit(1)

    if os.path.isdir(filename):
        print(f"Error: Not a file: {filename}", file=sys.stderr)
        sys.exit(1)

    if not os.access(filename, os.R_OK):
        print(f"Error: Permission denied: {filename}", file=sys.stderr)
        sys.exit(1)

    try:
        return FileRecordSource.open(filename)
    except SourceLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    filename = args.filename or args.filename_flag
    if not filename:
        parser.print_usage(sys.stderr)
        print("Error: No filename provided.", file=sys.stderr)
        sys.exit(1)

    setup_logging(debug=args.debug)
    if args.debug:
        print(f"Debug mode on, logging to {DEFAULT_LOG_FILE}", file=sys.stderr)

    source = load_source(filename)
    config = ViewerConfig(debug=args.debug)

    logger.info("Starting viewer for %s", filename)
    app = JlvApp(source, config)
    app.run()
    logger.info("Exiting viewer")


if __name__ == "__main__":
    main()

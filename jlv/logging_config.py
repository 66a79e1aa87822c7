"""Logging configuration for jlv.

The terminal belongs to the UI while the viewer runs, so log records go to
the Textual devtools console and, in debug mode, to a log file.
"""

import logging
import tempfile
from pathlib import Path
from typing import Optional

from textual.logging import TextualHandler


LOG_FORMAT = "%(asctime)s %(name)s[%(process)d]: %(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

DEFAULT_LOG_FILE = Path(tempfile.gettempdir()) / "jlv.log"


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """Configure the ``jlv`` logger.

    Args:
        debug: Log at DEBUG level and also write to ``log_file``.
        log_file: Debug log path (defaults to ``<tempdir>/jlv.log``)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("jlv")

    # Avoid duplicate handlers if logger already configured
    if logger.handlers:
        return logger

    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    textual_handler = TextualHandler()
    textual_handler.setLevel(level)
    textual_handler.setFormatter(formatter)
    logger.addHandler(textual_handler)

    if debug:
        file_handler = logging.FileHandler(log_file or DEFAULT_LOG_FILE, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def reset_logging() -> None:
    """Remove and close all handlers on the ``jlv`` logger."""
    logger = logging.getLogger("jlv")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)

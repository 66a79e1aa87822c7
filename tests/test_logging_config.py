"""Tests for jlv/logging_config.py."""

from __future__ import annotations

import logging

import pytest
from textual.logging import TextualHandler

from jlv.logging_config import reset_logging, setup_logging


@pytest.fixture(autouse=True)
def clean_logger():
    """Start and finish each test with an unconfigured jlv logger."""
    reset_logging()
    yield
    reset_logging()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level_is_info(self):
        """Without debug, the logger runs at INFO."""
        logger = setup_logging()
        assert logger.level == logging.INFO

    def test_textual_handler_attached(self):
        """Records always go to the Textual console handler."""
        logger = setup_logging()
        assert any(isinstance(h, TextualHandler) for h in logger.handlers)

    def test_no_file_without_debug(self, tmp_path):
        """No file handler is added unless debug is on."""
        log_file = tmp_path / "jlv.log"
        logger = setup_logging(debug=False, log_file=log_file)
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert not log_file.exists()

    def test_debug_writes_file(self, tmp_path):
        """Debug mode logs DEBUG records to the log file."""
        log_file = tmp_path / "jlv.log"
        logger = setup_logging(debug=True, log_file=log_file)
        assert logger.level == logging.DEBUG

        logging.getLogger("jlv.tests").debug("hello from the test")
        for handler in logger.handlers:
            handler.flush()

        assert "hello from the test" in log_file.read_text(encoding="utf-8")

    def test_idempotent(self, tmp_path):
        """Calling twice does not duplicate handlers."""
        first = setup_logging(debug=True, log_file=tmp_path / "a.log")
        count = len(first.handlers)
        second = setup_logging(debug=True, log_file=tmp_path / "a.log")
        assert second is first
        assert len(second.handlers) == count

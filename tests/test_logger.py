"""Tests for logging configuration."""

import logging
from logging.handlers import RotatingFileHandler

import pytest
from rich.logging import RichHandler

import notepdf.utils as utils
from notepdf.utils.logger import add_file_handler, configure_logging


def _close_handlers(logger):
    for handler in logger.handlers:
        handler.close()


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_rich_console_handler(self):
        """Test console output goes through rich."""
        configure_logging(level="INFO")

        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)

    def test_plain_console_handler(self):
        """Test rich output can be turned off."""
        configure_logging(level="DEBUG", rich_output=False)

        handler = logging.getLogger().handlers[0]
        assert type(handler) is logging.StreamHandler

    def test_log_file(self, temp_dir):
        """Test records are also written to the log file."""
        log_path = temp_dir / "logs" / "notepdf.log"
        configure_logging(level="INFO", log_file=str(log_path))
        root = logging.getLogger()

        logging.getLogger("notepdf.test").info("PDF saved as Meeting.pdf")
        _close_handlers(root)

        assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
        assert "PDF saved as Meeting.pdf" in log_path.read_text(encoding="utf-8")

    def test_invalid_level(self):
        """Test unknown level names are rejected."""
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(level="LOUD")

    def test_exports(self):
        """Test public helpers of the utils package."""
        assert set(utils.__all__) == {"add_file_handler", "atomic_write_bytes", "configure_logging"}


class TestAddFileHandler:
    """Test suite for add_file_handler."""

    def test_requires_logger(self, temp_dir):
        """Test argument validation."""
        with pytest.raises(ValueError):
            add_file_handler("notepdf", str(temp_dir / "x.log"))

    def test_handler_level(self, temp_dir):
        """Test the handler gets its own level."""
        logger = logging.getLogger("notepdf.file-test")
        add_file_handler(logger, str(temp_dir / "x.log"), level="ERROR")

        handler = logger.handlers[-1]
        try:
            assert handler.level == logging.ERROR
        finally:
            logger.removeHandler(handler)
            handler.close()

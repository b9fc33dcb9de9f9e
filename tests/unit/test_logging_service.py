"""Tests for logging service configuration."""

import logging
import tempfile
from pathlib import Path
from unittest.mock import patch

from src.services.logging import get_log_level, setup_server_logging


class TestServerLogging:
    """Test server logging configuration."""

    def setup_method(self):
        """Save original handlers before each test."""
        self.root_logger = logging.getLogger()
        self.original_handlers = self.root_logger.handlers.copy()
        self.original_level = self.root_logger.level

    def teardown_method(self):
        """Restore original handlers after each test."""
        for handler in self.root_logger.handlers[:]:
            handler.close()
            self.root_logger.removeHandler(handler)
        for handler in self.original_handlers:
            self.root_logger.addHandler(handler)
        self.root_logger.setLevel(self.original_level)

    def test_creates_log_directory(self) -> None:
        """Verify setup_server_logging creates logs directory if missing."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / "test_logs" / "server.log"
            assert not log_file.parent.exists()

            setup_server_logging(str(log_file))

            assert log_file.parent.exists()

    def test_replaces_existing_handlers(self) -> None:
        """Verify repeated setup leaves exactly stdout + file handlers."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / "server.log"
            dummy_handler = logging.StreamHandler()
            self.root_logger.addHandler(dummy_handler)

            setup_server_logging(str(log_file))
            setup_server_logging(str(log_file))

            assert len(self.root_logger.handlers) == 2
            assert dummy_handler not in self.root_logger.handlers

    def test_writes_formatted_records_to_file(self) -> None:
        """Verify file output carries timestamp, logger name and level."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / "server.log"

            with patch.dict("os.environ", {"LOG_LEVEL": "INFO"}, clear=False):
                setup_server_logging(str(log_file))

            logging.getLogger("src.services.ledger").warning("record_payment rejected")

            log_contents = log_file.read_text()
            assert "[20" in log_contents
            assert "src.services.ledger" in log_contents
            assert "WARNING" in log_contents
            assert "record_payment rejected" in log_contents

    def test_level_from_environment(self) -> None:
        """Verify LOG_LEVEL drives root and handler levels."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / "server.log"

            with patch.dict("os.environ", {"LOG_LEVEL": "debug"}, clear=False):
                setup_server_logging(str(log_file))

            assert self.root_logger.level == logging.DEBUG
            for handler in self.root_logger.handlers:
                assert handler.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        with patch.dict("os.environ", {"LOG_LEVEL": "VERBOSE"}, clear=False):
            assert get_log_level() == logging.INFO

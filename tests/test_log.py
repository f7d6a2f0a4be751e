"""
Logging Setup Tests

Verifies that setup_logging routes pocketnotes records to a file or the
console handler. The logger is restored afterwards so other tests keep
capturing records.
"""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from rich.logging import RichHandler

from pocketnotes.log import setup_logging


@pytest.fixture
def restore_logger() -> Generator[logging.Logger, None, None]:
    logger = logging.getLogger("pocketnotes")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_handler(self, restore_logger: logging.Logger) -> None:
        setup_logging("info")

        assert restore_logger.level == logging.INFO
        assert any(isinstance(h, RichHandler) for h in restore_logger.handlers)

    def test_file_handler(self, restore_logger: logging.Logger, tmp_path: Path) -> None:
        log_file = tmp_path / "pocketnotes.log"
        setup_logging("DEBUG", str(log_file))

        logging.getLogger("pocketnotes.repository.note").error("Error saving notes")
        for handler in restore_logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "ERROR" in content
        assert "Error saving notes" in content

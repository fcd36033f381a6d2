"""Tests for the rich-backed logger setup."""

from __future__ import annotations

import logging
import logging.handlers
from io import StringIO
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from audpl.platform.logging import LOGGER_NAME, setup_logger


def test_console_handler_renders_messages(restore_logger: None) -> None:
    """Messages at or above the console level reach the rich console."""

    _ = restore_logger
    output = StringIO()
    logger = setup_logger(console=Console(file=output, width=120))

    logger.info("decoded %d tracks", 3)
    logger.debug("hidden detail")

    rendered = output.getvalue()
    assert "decoded 3 tracks" in rendered
    assert "hidden detail" not in rendered


def test_setup_replaces_existing_handlers(restore_logger: None) -> None:
    """Calling setup twice does not duplicate handlers."""

    _ = restore_logger
    _ = setup_logger()
    logger = setup_logger()

    assert logger is logging.getLogger(LOGGER_NAME)
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)


def test_file_handler_writes_debug_records(tmp_path: Path, restore_logger: None) -> None:
    """The rotating file handler captures debug output."""

    _ = restore_logger
    log_file = tmp_path / "nested" / "audpl.log"
    logger = setup_logger(log_file=log_file, console=Console(file=StringIO()))

    logger.debug("written to file")
    for handler in logger.handlers:
        handler.flush()

    assert any(
        isinstance(handler, logging.handlers.RotatingFileHandler)
        for handler in logger.handlers
    )
    assert "written to file" in log_file.read_text(encoding="utf-8")

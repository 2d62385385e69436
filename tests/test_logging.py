"""Tests for mindeps.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from mindeps.logging import configure_logging, get_logger


def test_configure_logging_replaces_handlers_on_repeat_calls(tmp_path: Path) -> None:
    configure_logging(log_file=tmp_path / "first.log")
    logger = configure_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_file_sink_records_debug_without_verbose(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    logger = configure_logging(verbose=False, log_file=log_file)

    get_logger("closure").debug("folded %d reports", 3)

    stream_handler, file_handler = logger.handlers
    assert stream_handler.level == logging.INFO
    assert file_handler.level == logging.DEBUG
    assert "DEBUG mindeps.closure: folded 3 reports" in log_file.read_text(encoding="utf-8")

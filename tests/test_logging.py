"""Tests for docrender.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from docrender.logging import configure_logging, get_logger


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "docrender"
    assert get_logger("markdown").name == "docrender.markdown"


def test_configure_logging_levels() -> None:
    assert configure_logging().level == logging.INFO
    assert configure_logging(verbose=True).level == logging.DEBUG
    assert configure_logging(verbose=True, quiet=True).level == logging.WARNING


def test_configure_logging_replaces_handlers(tmp_path: Path) -> None:
    configure_logging()
    logger = configure_logging(log_file=tmp_path / "docrender.log")

    assert len(logger.handlers) == 2
    get_logger("cli").debug("written to file only")
    for handler in logger.handlers:
        handler.flush()

    assert "written to file only" in (tmp_path / "docrender.log").read_text(encoding="utf-8")
    configure_logging()
    assert len(logger.handlers) == 1

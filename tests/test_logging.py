"""Tests for soapgen.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from soapgen.logging import configure_logging, get_logger


def test_get_logger_nests_under_soapgen() -> None:
    assert get_logger().name == "soapgen"
    assert get_logger("orchestrator").name == "soapgen.orchestrator"


def test_configure_logging_replaces_previous_handlers(tmp_path: Path) -> None:
    configure_logging(log_file=tmp_path / "first.log")
    logger = configure_logging(verbose=True)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0], logging.FileHandler)


def test_configure_logging_writes_to_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "soapgen.log"
    configure_logging(log_file=log_file)

    get_logger("cli").debug("hidden")
    get_logger("cli").warning("kept")

    contents = log_file.read_text(encoding="utf-8")
    assert "WARNING soapgen.cli: kept" in contents
    assert "hidden" not in contents

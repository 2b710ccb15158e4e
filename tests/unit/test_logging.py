"""Tests for parencalc logging setup."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from parencalc.core.logging import ConsoleFormatter, JSONLFormatter, setup_logging


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="parencalc.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestFormatters:
    def test_jsonl_entry(self) -> None:
        entry = json.loads(JSONLFormatter().format(_record(logging.DEBUG, "Parsed 3 tokens")))
        assert entry["level"] == "DEBUG"
        assert entry["logger"] == "parencalc.test"
        assert entry["message"] == "Parsed 3 tokens"
        assert entry["timestamp"].endswith("Z")

    def test_console_labels_non_info(self) -> None:
        formatter = ConsoleFormatter()
        assert "WARNING" in formatter.format(_record(logging.WARNING, "careful"))
        assert "INFO" not in formatter.format(_record(logging.INFO, "hello"))


class TestSetupLogging:
    def test_console_only(self) -> None:
        logger = setup_logging(logging.DEBUG)
        assert logger.name == "parencalc"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_setup_does_not_stack(self) -> None:
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_jsonl_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "parencalc.log"
        logger = setup_logging(logging.DEBUG, log_file)
        logging.getLogger("parencalc.core.expression_lang.parser").debug("Parsed %d tokens", 5)
        for handler in logger.handlers:
            handler.flush()

        lines = log_file.read_text().splitlines()
        assert json.loads(lines[-1])["message"] == "Parsed 5 tokens"

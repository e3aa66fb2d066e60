"""
Tests for grow_light_advisor/utils/logging.py.

What we test
------------
configure_logging():
  - Console handler writes to stderr at the configured level.
  - log_file adds a FileHandler and creates missing parent directories.
  - json_format emits one JSON object per line with ts/level/logger/msg
    plus any ``extra=`` fields.
  - Plain format is used when json_format is off.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

from grow_light_advisor.config import LoggingConfig
from grow_light_advisor.utils.logging import _JsonFormatter, configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def _flush_root() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


class TestConfigureLogging:
    def test_console_handler_on_stderr(self):
        configure_logging(LoggingConfig(level="warning"))
        root = logging.getLogger()
        assert root.level == logging.WARNING
        [console] = root.handlers
        assert isinstance(console, logging.StreamHandler)
        assert console.stream is sys.stderr

    def test_json_lines_written_to_log_file(self, tmp_path: Path):
        log_path = tmp_path / "logs" / "advisor.log"
        configure_logging(
            LoggingConfig(level="INFO", log_file=str(log_path), json_format=True)
        )

        logging.getLogger("grow_light_advisor.test").info(
            "Selected %s", "24W", extra={"distance_cm": 60}
        )
        _flush_root()

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        payload = json.loads(lines[0])
        assert set(payload) >= {"ts", "level", "logger", "msg", "distance_cm"}
        assert payload["level"] == "INFO"
        assert payload["logger"] == "grow_light_advisor.test"
        assert payload["msg"] == "Selected 24W"
        assert payload["distance_cm"] == 60

    def test_below_level_not_written(self, tmp_path: Path):
        log_path = tmp_path / "advisor.log"
        configure_logging(LoggingConfig(level="WARNING", log_file=str(log_path)))

        log = logging.getLogger("grow_light_advisor.test")
        log.info("hidden")
        log.warning("shown")
        _flush_root()

        text = log_path.read_text(encoding="utf-8")
        assert "hidden" not in text
        assert "[WARNING] grow_light_advisor.test: shown" in text


class TestJsonFormatter:
    def test_standard_attributes_not_duplicated(self):
        record = logging.LogRecord(
            "grow_light_advisor.test", logging.DEBUG, __file__, 1, "hello", None, None
        )
        payload = json.loads(_JsonFormatter().format(record))
        assert payload["msg"] == "hello"
        assert "lineno" not in payload
        assert "args" not in payload

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                "grow_light_advisor.test", logging.ERROR, __file__, 1, "failed",
                None, sys.exc_info(),
            )
        payload = json.loads(_JsonFormatter().format(record))
        assert "RuntimeError: boom" in payload["exc"]

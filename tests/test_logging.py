"""Tests for logging helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from formguard.lib.logging import JSONFormatter, get_log_level_from_env, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _record(msg: str = "hello %s", args=("world",), **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "formguard.test", logging.WARNING, __file__, 10, msg, args, None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_basic_fields(self) -> None:
        """Output carries level, logger and the rendered message."""
        data = json.loads(JSONFormatter().format(_record()))

        assert data["level"] == "WARNING"
        assert data["logger"] == "formguard.test"
        assert data["message"] == "hello world"
        assert data["timestamp"].endswith("Z")
        assert data["source"]["line"] == 10

    def test_extra_attributes(self) -> None:
        """Values passed via extra= are grouped under extra."""
        data = json.loads(JSONFormatter().format(_record(field_id="abc")))
        assert data["extra"] == {"field_id": "abc"}

    def test_excluded_extra(self) -> None:
        """Excluded attributes are dropped."""
        formatter = JSONFormatter(exclude_fields=["field_id"])
        data = json.loads(formatter.format(_record(field_id="abc")))
        assert "extra" not in data

    def test_include_fields_promoted(self) -> None:
        """Included attributes appear at the top level."""
        formatter = JSONFormatter(include_fields=["form"])
        data = json.loads(formatter.format(_record(form="signin")))
        assert data["form"] == "signin"


class TestLogLevelFromEnv:
    """Tests for get_log_level_from_env."""

    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without variables the default is used."""
        monkeypatch.delenv("FORMGUARD_LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert get_log_level_from_env() == logging.INFO

    def test_specific_variable_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """FORMGUARD_LOG_LEVEL takes precedence over LOG_LEVEL."""
        monkeypatch.setenv("FORMGUARD_LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert get_log_level_from_env() == logging.DEBUG

    def test_unknown_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown names fall back to the default."""
        monkeypatch.delenv("FORMGUARD_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        assert get_log_level_from_env(logging.ERROR) == logging.ERROR


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_only(self, tmp_path: Path, restore_root_logger) -> None:
        """With console off, records only go to the log file."""
        log_file = tmp_path / "form.log"

        setup_logging(log_file=str(log_file), level_name="DEBUG", console=False)
        logging.getLogger("formguard.test").debug("field registered")

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        for handler in root.handlers:
            handler.flush()
        assert "field registered" in log_file.read_text(encoding="utf-8")

    def test_verbose_overrides_level(self, restore_root_logger) -> None:
        """verbose forces DEBUG."""
        setup_logging(verbose=True, level_name="ERROR")
        assert restore_root_logger.level == logging.DEBUG

    def test_json_file(self, tmp_path: Path, restore_root_logger) -> None:
        """JSON format writes one object per line."""
        log_file = tmp_path / "form.jsonl"

        setup_logging(json_format=True, log_file=str(log_file), console=False)
        logging.getLogger("formguard.test").warning("invalid form")
        for handler in restore_root_logger.handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[0]
        assert json.loads(line)["message"] == "invalid form"

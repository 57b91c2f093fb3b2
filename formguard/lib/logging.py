"""Logging utilities for formguard.

Provides structured JSON logging option and environment-driven levels.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

__all__ = [
    "setup_logging",
    "JSONFormatter",
    "get_log_level_from_env",
]

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class JSONFormatter(logging.Formatter):
    """Formatter that outputs log records as JSON.

    Example output:
        {"timestamp": "2025-01-15T10:30:00.123Z", "level": "DEBUG",
         "logger": "formguard.models.registry", "message": "Registered field email"}
    """

    def __init__(
        self,
        include_fields: Optional[list[str]] = None,
        exclude_fields: Optional[list[str]] = None,
    ):
        """Initialize JSON formatter.

        Args:
            include_fields: Extra fields to include (from record.__dict__)
            exclude_fields: Fields to exclude from output
        """
        super().__init__()
        self.include_fields = include_fields or []
        self.exclude_fields = exclude_fields or []

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.pathname:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Anything passed through extra=
        extra_attrs = {
            k: v
            for k, v in record.__dict__.items()
            if k not in logging.LogRecord("", 0, "", 0, "", (), None).__dict__
            and k not in ("message", "asctime")
            and k not in self.exclude_fields
        }
        if extra_attrs:
            log_data["extra"] = extra_attrs

        return json.dumps(log_data, default=str)


def get_log_level_from_env(default: int = logging.INFO) -> int:
    """Get log level from environment variable.

    Environment variables checked (in order):
    1. FORMGUARD_LOG_LEVEL
    2. LOG_LEVEL

    Unknown names fall back to ``default``.
    """
    level_name = os.environ.get("FORMGUARD_LOG_LEVEL") or os.environ.get("LOG_LEVEL")
    if not level_name:
        return default
    return _LEVELS.get(level_name.upper(), default)


def setup_logging(
    verbose: bool = False,
    json_format: bool = False,
    log_file: Optional[str] = None,
    level_name: Optional[str] = None,
    console: bool = True,
) -> None:
    """Configure the root logger with optional JSON formatting.

    Args:
        verbose: Force DEBUG level
        json_format: Emit JSON records instead of plain text
        log_file: Optional file to mirror log output into
        level_name: Level to use when not verbose (e.g. from settings);
            falls back to the environment
        console: Attach a stdout handler; turn off while a full-screen UI
            owns the terminal
    """
    if verbose:
        level = logging.DEBUG
    elif level_name and level_name.upper() in _LEVELS:
        level = _LEVELS[level_name.upper()]
    else:
        level = get_log_level_from_env()

    formatter = JSONFormatter() if json_format else logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Textual and prompt_toolkit are chatty at DEBUG
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("markdown_it").setLevel(logging.WARNING)

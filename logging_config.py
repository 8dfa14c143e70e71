"""Project-wide logging setup.

Design goals:
- Write logs to a UTF-8 rotating file.
- Keep the console quiet by default (console logging is off unless enabled).
- Be idempotent: calling setup_logging() multiple times won't duplicate handlers.
- Optionally emit one JSON object per line for log shipping.

Usage:
    from logging_config import setup_logging
    setup_logging()
    setup_logging(json_format=True)   # or: python main.py --log-json

Environment overrides:
    INKWELL_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    INKWELL_LOG_FILE=path/to/file.log
    INKWELL_LOG_FORMAT=json|text
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Callable

_FILE_HANDLER_NAME = "inkwell_file"
_CONSOLE_HANDLER_NAME = "inkwell_console"
_DEFAULT_LOG_PATH = Path("logs") / "inkwell.log"

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "extra_data"):
            log_entry["data"] = record.extra_data
        return json.dumps(log_entry, ensure_ascii=False, default=str)


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level

    level_str = (level or "").strip().upper()
    if not level_str:
        return logging.INFO

    return logging._nameToLevel.get(level_str, logging.INFO)


def _make_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JsonFormatter()
    return logging.Formatter(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)


def _resolve_log_path(log_file: str | None) -> Path:
    """Absolute log path; its directory is created."""
    path = Path(log_file) if log_file else _DEFAULT_LOG_PATH
    if not path.is_absolute():
        path = Path.cwd() / path
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _ensure_handler(
    root: logging.Logger,
    name: str,
    factory: Callable[[], logging.Handler],
    formatter: logging.Formatter,
    level: int,
) -> logging.Handler:
    """Reuse the root handler called ``name`` or attach a new one."""
    handler = next((h for h in root.handlers if h.name == name), None)
    if handler is None:
        handler = factory()
        handler.name = name
        root.addHandler(handler)
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def setup_logging(
    *,
    level: str | int = "INFO",
    log_file: str | None = None,
    enable_file: bool = True,
    enable_console: bool = False,
    console_level: str | int = "WARNING",
    json_format: bool = False,
    max_bytes: int = 2 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """Configure the root logger.

    Environment overrides win over the arguments. Returns the root logger.
    """
    level = os.environ.get("INKWELL_LOG_LEVEL") or level
    log_file = os.environ.get("INKWELL_LOG_FILE") or log_file
    env_format = os.environ.get("INKWELL_LOG_FORMAT", "").strip().lower()
    if env_format:
        json_format = env_format == "json"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # let handlers filter
    formatter = _make_formatter(json_format)

    log_path: Path | None = None
    if enable_file:
        log_path = _resolve_log_path(log_file)
        _ensure_handler(
            root,
            _FILE_HANDLER_NAME,
            lambda: RotatingFileHandler(
                str(log_path), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            ),
            formatter,
            _parse_level(level),
        )

    if enable_console:
        _ensure_handler(
            root, _CONSOLE_HANDLER_NAME, logging.StreamHandler, formatter, _parse_level(console_level)
        )

    logging.getLogger(__name__).info(
        "Logging initialized | level=%s file=%s console=%s json=%s",
        level,
        log_path,
        enable_console,
        json_format,
    )

    return root

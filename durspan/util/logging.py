"""Logging configuration for durspan.

Provides a centralized logging setup with:
- Console handler (stderr) with configurable level
- Optional file handler (JSON lines for machine parsing)
- Environment-based configuration

Usage:
    from durspan.util.logging import get_logger, configure_logging

    configure_logging(level="DEBUG", json_file="/tmp/durspan.log")
    logger = get_logger(__name__)
    logger.info("Parsed duration", extra={"input_text": "2h 15m"})
"""

from __future__ import annotations

import json
import logging
import os
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional


_configured = False
_root_logger_name = "durspan"


class JSONFormatter(logging.Formatter):
    """Emit log records as single-line JSON for machine parsing."""

    EXTRA_KEYS = ("input_text", "env_var", "error_kind", "exit_code")

    def format(self, record: logging.LogRecord) -> str:
        output: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in self.EXTRA_KEYS:
            if hasattr(record, key):
                output[key] = getattr(record, key)
        if record.exc_info:
            output["traceback"] = "".join(traceback.format_exception(*record.exc_info))
        return json.dumps(output, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable console format with optional color."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname
        if self.use_color:
            level_str = f"{self.LEVEL_COLORS.get(level, '')}{level:8}{self.RESET}"
        else:
            level_str = f"{level:8}"
        name = record.name.replace("durspan.", "")
        base = f"[{ts}] {level_str} [{name}] {record.getMessage()}"
        if record.exc_info:
            base += "\n" + "".join(traceback.format_exception(*record.exc_info))
        return base


def configure_logging(
    *,
    level: Optional[str] = None,
    json_file: Optional[str] = None,
    use_color: bool = True,
) -> None:
    """Configure the durspan logging subsystem.

    Args:
        level: Log level name. Defaults to DURSPAN_LOG_LEVEL (or WARNING),
               or DEBUG if DURSPAN_DEBUG=1 is set.
        json_file: Optional path to append JSON-formatted logs to.
        use_color: Whether to colorize console output (auto-disabled if not a TTY).

    Calling it again replaces the handlers installed by the previous call.
    """
    global _configured

    if level is None:
        if os.environ.get("DURSPAN_DEBUG", "").strip() in ("1", "true", "yes"):
            level = "DEBUG"
        else:
            level = os.environ.get("DURSPAN_LOG_LEVEL", "WARNING")

    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(_root_logger_name)
    logger.setLevel(numeric_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(ConsoleFormatter(use_color=use_color))
    logger.addHandler(console_handler)

    if json_file:
        try:
            file_handler = logging.FileHandler(json_file, mode="a", encoding="utf-8")
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(JSONFormatter())
            logger.addHandler(file_handler)
        except OSError as exc:
            logger.warning("Failed to open JSON log file %s: %s", json_file, exc)

    logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the durspan namespace.

    If configure_logging() has not been called, a default configuration
    is applied automatically.
    """
    if not _configured:
        configure_logging()

    if not name.startswith(_root_logger_name):
        if name == "__main__":
            name = f"{_root_logger_name}.main"
        else:
            name = f"{_root_logger_name}.{name}"

    return logging.getLogger(name)

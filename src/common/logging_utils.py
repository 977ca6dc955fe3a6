"""Centralized logging configuration for the preflight check.

Errors and warnings are the user-facing output of this tool, so records at
WARNING and above are rendered as bold red ``*** message`` lines on stderr.
Lower levels use the plain ``[LEVEL] message`` format.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, Optional

from constants import Constants

_HANDLER_NAME = "preflight-stderr"


class AnsiFormatter(logging.Formatter):
    """Formatter that highlights WARNING+ records with ANSI escapes."""

    def __init__(self, fmt: Optional[str] = None, use_color: bool = True):
        super().__init__(fmt or Constants.LOG_FORMAT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno < logging.WARNING:
            return super().format(record)
        message = f"*** {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if not self.use_color:
            return message
        return f"{Constants.ANSI_ERROR}{message}{Constants.ANSI_RESET}"


def _resolve_level(value: Optional[str]) -> int:
    if not value:
        return logging.INFO
    level = logging.getLevelName(str(value).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(log_file: Optional[str] = None) -> None:
    """Configure the root logger once.

    The level comes from the PREFLIGHT_LOG_LEVEL environment variable. Calling
    this again replaces the stderr handler instead of stacking a new one.
    """
    root = logging.getLogger()
    root.setLevel(_resolve_level(os.environ.get(Constants.ENV_LOG_LEVEL)))

    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(AnsiFormatter(use_color=not os.environ.get(Constants.ENV_NO_COLOR)))
    root.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
        root.addHandler(file_handler)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when debug records for this logger would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**kwargs: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured debug records.

    None values are dropped so that callers can pass optional fields freely.
    """
    return {key: value for key, value in kwargs.items() if value is not None}

"""Lightweight structured logging for manifest runs."""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict

EXTRA_ATTRIBUTES = ("line_number", "instruction", "input_path", "output_path", "error_count")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in EXTRA_ATTRIBUTES:
            value = getattr(record, attr, None)
            if value is not None:
                payload[attr] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


HANDLER_NAME = "flightcheck"


def _resolve_level(raw_level: str | int, default_level: str | int) -> str | int:
    if isinstance(raw_level, int):
        return raw_level
    name = raw_level.strip().upper()
    # getLevelName maps known names to their number and echoes anything else back.
    if name and isinstance(logging.getLevelName(name), int):
        return name
    return default_level


def setup_logging(default_level: str | int = logging.INFO) -> logging.Handler:
    """Route manifest logs to stderr as JSON; repeat calls reconfigure the same handler."""
    level = _resolve_level(os.environ.get("LOG_LEVEL", default_level), default_level)
    root = logging.getLogger()
    root.setLevel(level)

    handler = next((h for h in root.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)
    handler.setFormatter(JsonFormatter())
    return handler

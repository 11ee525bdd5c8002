"""Logging setup: human-readable or JSON lines on stderr, or into a running Textual app."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(
    level: str = "WARNING",
    fmt: str = "text",
    handler: Optional[logging.Handler] = None,
) -> logging.Handler:
    """Attach a single handler (stderr unless given) to the package logger and return it."""
    handler = handler or logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root = logging.getLogger("courseplanner")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler


def setup_app_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Send package logs to the Textual log while an app owns the terminal."""
    from textual.logging import TextualHandler

    return setup_logging(level, fmt, handler=TextualHandler())

"""Structured Logging — JSON formatter and setup for embedding applications.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, candidate_length) surfaced when present
    - setup_logging installs at most one handler: repeated calls replace it
    - The library never calls setup_logging itself — applications opt in

Design Decisions:
    - JSONFormatter over third-party libs: zero extra dependencies, full control
    - Unspecified level/format fall back to Settings (ULN_LOG_LEVEL, ULN_LOG_FORMAT)
"""

import logging
import json
from datetime import datetime, timezone

from uln.config import get_settings

EXTRA_FIELDS = ("error_code", "candidate_length")

_installed_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    global _installed_handler
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))

    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _installed_handler = handler
    return handler

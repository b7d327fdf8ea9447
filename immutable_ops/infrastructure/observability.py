"""Structured Logging — JSON formatter and setup for library consumers and tests.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (operation, entry, section, error_code) surfaced when present
    - JSON format by default, human-readable "text" format on request
    - setup_logging is idempotent: re-running replaces its handler, never stacks them
    - Unset level/format come from Settings (IMMUTABLE_OPS_LOG_LEVEL, IMMUTABLE_OPS_LOG_FORMAT)

Design Decisions:
    - JSONFormatter over third-party libs: zero extra dependencies
    - Configures the "immutable_ops" logger only; the root logger is left to the host application
"""

import logging
import json
from datetime import datetime, timezone

from immutable_ops.config import get_settings


LOGGER_NAME = "immutable_ops"
_EXTRA_FIELDS: tuple[str, ...] = (
    "operation", "entry", "section", "error_code", "passed", "failed",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _OwnedHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Logger:
    """Configure the library logger. Returns it.

    level and fmt default to Settings.log_level and Settings.log_format.
    """
    settings = get_settings()
    level = settings.log_level if level is None else level
    fmt = settings.log_format if fmt is None else fmt
    logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in logger.handlers if isinstance(h, _OwnedHandler)]:
        logger.removeHandler(existing)

    handler = _OwnedHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger

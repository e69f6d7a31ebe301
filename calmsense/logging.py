"""
Logging for calmsense.

Everything logs under the ``calmsense`` logger tree. In production the
handler writes one JSON object per line; set CALMSENSE_LOG_FORMAT=text
for a readable console format while developing.

Never hand message text to a logger. Chat messages are health data, so
log what was found (levels, category names, counts, timings) and leave
the words out. The JSON formatter enforces this by copying only the
fields named in ``_EXTRA_FIELDS``.

    from calmsense.logging import get_logger
    logger = get_logger("detector")
    logger.info("Scan complete", extra={"anxiety_level": 7, "duration_ms": 1.2})
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone


LOG_LEVEL = os.getenv("CALMSENSE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("CALMSENSE_LOG_FORMAT", "json")  # json | text

_NAMESPACE = "calmsense"

_EXTRA_FIELDS = (
    "anxiety_level", "categories_met", "score", "matches_count", "risk_level",
    "triggers_count", "language", "items", "scanned", "error", "error_type",
    "duration_ms", "status_code", "method", "path", "core_version",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with whitelisted extras only."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in _EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Console format: time, level, logger, message."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def _build_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    formatter = JSONFormatter() if LOG_FORMAT == "json" else TextFormatter()
    handler.setFormatter(formatter)
    return handler


def setup_logging() -> logging.Logger:
    """Install the stdout handler on the calmsense logger. Safe to call twice."""
    root = logging.getLogger(_NAMESPACE)
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    root.handlers.clear()
    root.addHandler(_build_handler())

    # request logging middleware already covers access lines
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    """Child logger, e.g. get_logger("api") -> calmsense.api."""
    return logging.getLogger(f"{_NAMESPACE}.{name}")

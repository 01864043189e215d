"""JSON-lines logging for the benchmark harness and the repository tools.

Guard clauses themselves never log; a failing check only raises. Measurements
are attached to records through ``extra=`` and copied into the JSON object
when present.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

MEASUREMENT_FIELDS: tuple[str, ...] = ("check", "variant", "iterations", "elapsed_ms")


class StructuredFormatter(logging.Formatter):
    """One JSON object per record; keys are stable across releases."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        for key in MEASUREMENT_FIELDS:
            if hasattr(record, key):
                data[key] = getattr(record, key)
        return json.dumps(data, ensure_ascii=False)


def setup_logging(level: str = "INFO") -> None:
    """Send root records to stderr as JSON lines at ``level``.

    Calling it again only updates the level; a second structured handler is
    never installed. Unknown level names fall back to INFO.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(isinstance(h.formatter, StructuredFormatter) for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

from __future__ import annotations

import json
import logging

from guardclauses.logging import StructuredFormatter, get_logger, setup_logging


def test_setup_logging_installs_one_structured_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    for h in saved_handlers:
        root.removeHandler(h)
    try:
        setup_logging("DEBUG")
        structured = [
            h for h in root.handlers if isinstance(h.formatter, StructuredFormatter)
        ]
        assert len(structured) == 1
        assert root.level == logging.DEBUG

        setup_logging("warning")
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

        setup_logging("nonsense")
        assert root.level == logging.INFO
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)


def test_formatter_includes_measurement_fields() -> None:
    record = logging.makeLogRecord(
        {
            "name": "guardclauses.benchmark",
            "levelname": "INFO",
            "levelno": logging.INFO,
            "msg": "measured %s",
            "args": ("must_be_one_of",),
            "check": "must_be_one_of",
            "elapsed_ms": 1.5,
        }
    )
    data = json.loads(StructuredFormatter().format(record))
    assert data["message"] == "measured must_be_one_of"
    assert data["level"] == "INFO"
    assert data["check"] == "must_be_one_of"
    assert data["elapsed_ms"] == 1.5
    assert "variant" not in data


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("guardclauses.x").name == "guardclauses.x"

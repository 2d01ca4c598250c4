"""Structured Logging - JSON formatter fields and handler setup."""

import json
import logging

from message_board.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "message_board.test", logging.INFO, __file__, 1, "stored %s", ("x",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "message_board.test"
    assert out["message"] == "stored x"
    assert "timestamp" in out


def test_json_formatter_includes_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(message_id=3, upstream_status=502, unrelated="nope"),
    ))
    assert out["message_id"] == 3
    assert out["upstream_status"] == 502
    assert "unrelated" not in out


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert len(logging.root.handlers) == before + 1
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.removeHandler(second)

"""Structured Logging — JSONFormatter fields and setup_logging idempotency."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.services.activate_benefit", logging.INFO, __file__, 1,
        "Benefit activated", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "app.services.activate_benefit"
    assert log["message"] == "Benefit activated"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(benefit_id=3, operation="activate_benefit"),
    ))
    assert log["benefit_id"] == 3
    assert log["operation"] == "activate_benefit"
    assert "error_code" not in log


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    level = logging.root.level
    try:
        setup_logging("DEBUG", "text")
        setup_logging("DEBUG", "json")
        assert len(logging.root.handlers) == before + 1
        assert logging.root.level == logging.DEBUG
    finally:
        for handler in list(logging.root.handlers):
            if handler.get_name() == "benefits-api":
                logging.root.removeHandler(handler)
        logging.root.setLevel(level)

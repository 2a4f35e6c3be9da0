"""Structured Logging — JSON shape and idempotent setup."""

import json
import logging

from intern_tracker.infrastructure.observability import (
    JSONFormatter, _InternTrackerHandler, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "intern_tracker.test", logging.INFO, __file__, 1, "Intern %s created", ("INT-001",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "intern_tracker.test"
    assert payload["message"] == "Intern INT-001 created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_extra_fields():
    payload = json.loads(JSONFormatter().format(
        _record(intern_id="INT-001", status_code=201, method="POST"),
    ))
    assert payload["intern_id"] == "INT-001"
    assert payload["status_code"] == 201
    assert payload["method"] == "POST"
    assert "error_code" not in payload


def test_setup_logging_is_idempotent():
    level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        ours = [h for h in logging.root.handlers if isinstance(h, _InternTrackerHandler)]
        assert len(ours) == 1
        assert not isinstance(ours[0].formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.setLevel(level)

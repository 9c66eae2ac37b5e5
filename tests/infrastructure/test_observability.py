"""Structured Logging: JSONFormatter output shape."""

import json
import logging

from baas_mcp.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "baas_mcp.test", logging.ERROR, __file__, 1,
        "Failed to get meeting data: %s", ("HTTP 500",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "ERROR"
    assert log["logger"] == "baas_mcp.test"
    assert log["message"] == "Failed to get meeting data: HTTP 500"
    assert "timestamp" in log


def test_json_formatter_surfaces_tool_context():
    log = json.loads(JSONFormatter().format(_record(
        tool_name="getMeetingData", tool_category="meeting",
        backend_call="get_meeting_data",
        status_code=500, unrelated="dropped",
    )))
    assert log["tool_name"] == "getMeetingData"
    assert log["tool_category"] == "meeting"
    assert log["backend_call"] == "get_meeting_data"
    assert log["status_code"] == 500
    assert "unrelated" not in log

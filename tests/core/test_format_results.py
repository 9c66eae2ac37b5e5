"""Result Formatting: tests for renderers and the ToolResult wire form."""

import json

from baas_mcp.core.format_results import (
    fixed_message, json_dump, status_message, to_json_text, with_value,
)
from baas_mcp.core.tool_result import TextContent, ToolResult


def test_json_dump_renders_full_structure_with_indent():
    data = {"bot_data": {"transcripts": [{"speaker": "Ana", "words": ["olá"]}]}}
    assert json_dump()(data) == json.dumps(data, indent=2, ensure_ascii=False)


def test_json_dump_prefix():
    text = json_dump("Successfully created calendar: ")({"uuid": "cal-1"})
    assert text.startswith("Successfully created calendar: {\n")
    assert '"uuid": "cal-1"' in text


def test_json_text_handles_non_json_types():
    from datetime import date
    assert to_json_text({"day": date(2026, 1, 2)}) == '{\n  "day": "2026-01-02"\n}'


def test_status_message_true_and_false():
    render = status_message("Successfully left meeting", "Failed to leave meeting")
    assert render(True) == "Successfully left meeting"
    assert render(False) == "Failed to leave meeting"


def test_fixed_message_ignores_value():
    render = fixed_message("Successfully deleted meeting data")
    assert render({"ok": False}) == "Successfully deleted meeting data"
    assert render(None) == "Successfully deleted meeting data"


def test_with_value_appends():
    assert with_value("Tool echo: ")("ping") == "Tool echo: ping"


def test_tool_result_text_omits_is_error():
    assert ToolResult.text("hi").to_dict() == {
        "content": [{"type": "text", "text": "hi"}],
    }


def test_tool_result_error_sets_flag():
    result = ToolResult.error("Failed to list events")
    assert result.is_error
    assert result.to_dict() == {
        "content": [{"type": "text", "text": "Failed to list events"}],
        "isError": True,
    }


def test_text_content_defaults_to_text_type():
    assert TextContent("x").type == "text"

"""Diagnostic Tool Schemas: echo, for checking the agent <-> server round trip."""

from baas_mcp.core.domain_types import ToolCategory
from baas_mcp.core.format_results import with_value
from baas_mcp.core.tool_schema import ToolSchema, string

TOOLS_DIAGNOSTIC = [
    {
        "name": "echo",
        "description": "Echo a message",
        "input_schema": ToolSchema((string("message"),)),
        "render": with_value("Tool echo: "),
        "failure_message": "Failed to echo message",
        "category": ToolCategory.DIAGNOSTIC,
    },
]

"""Tool Call Schemas: REST request/response shapes for /api/v1/tools.

Invariants:
    - arguments accepted as-is (Any): schema validation is the dispatcher's job,
      so a malformed bag yields a ToolResult error, not an HTTP 400

Design Decisions:
    - Response models mirror the MCP envelope exactly, including the camelCase
      isError / inputSchema keys agents expect
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolCallRequest(BaseModel):
    arguments: Any = None


class TextContentOut(BaseModel):
    type: str = "text"
    text: str


class ToolResultOut(BaseModel):
    """ToolResult envelope; isError omitted when false (response_model_exclude_none)."""
    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContentOut]
    is_error: bool | None = Field(default=None, alias="isError")


class ToolInfoOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: dict = Field(alias="inputSchema")


class ToolListOut(BaseModel):
    tools: list[ToolInfoOut]

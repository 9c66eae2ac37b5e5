"""JSON-RPC Schemas: MCP request/response shapes for the /mcp endpoint.

Invariants:
    - A request without an "id" member is a notification and gets no response body
    - Error responses always carry code + message; id echoes the request (or null)

Design Decisions:
    - Pydantic at the system boundary, plain dicts on the way out: responses are
      small and fixed-shape, a model per response adds nothing
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602

SUPPORTED_PROTOCOL_VERSIONS = ("2024-11-05", "2025-03-26", "2025-06-18")
LATEST_PROTOCOL_VERSION = SUPPORTED_PROTOCOL_VERSIONS[-1]


class JsonRpcRequest(BaseModel):
    """Inbound JSON-RPC 2.0 request or notification."""
    model_config = ConfigDict(extra="ignore")

    jsonrpc: Literal["2.0"]
    method: str
    id: int | str | None = None
    params: dict[str, Any] | None = None

    @property
    def is_notification(self) -> bool:
        return "id" not in self.model_fields_set


class ToolCallParams(BaseModel):
    """params of a tools/call request."""
    name: str
    arguments: Any = None


def rpc_result(request_id: int | str | None, result: dict) -> dict:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def rpc_error(request_id: int | str | None, code: int, message: str) -> dict:
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "error": {"code": code, "message": message},
    }

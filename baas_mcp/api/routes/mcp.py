"""MCP Endpoint: JSON-RPC 2.0 over HTTP POST for MCP clients.

Invariants:
    - Methods handled: initialize, ping, tools/list, tools/call
    - notifications/* (and any request without an id) answered with 202, no body
    - tools/call never produces a JSON-RPC error for tool-level failures: those
      come back as a result with isError=true, exactly as the dispatcher built it
    - Malformed JSON -> -32700; non-request JSON -> -32600; unknown method -> -32601

Design Decisions:
    - Raw Request parsing instead of a pydantic body parameter: the global
      RequestValidationError handler answers in REST shape, which an MCP client
      cannot read (ADR: one error channel per protocol)
    - Explicit method table over dynamic lookup: every supported method visible here
"""

import json
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from baas_mcp.api.dependencies import get_dispatch
from baas_mcp.config import get_settings
from baas_mcp.schemas.jsonrpc import (
    INVALID_PARAMS, INVALID_REQUEST, LATEST_PROTOCOL_VERSION, METHOD_NOT_FOUND,
    PARSE_ERROR, SUPPORTED_PROTOCOL_VERSIONS, JsonRpcRequest, ToolCallParams,
    rpc_error, rpc_result,
)
from baas_mcp.services.tool_dispatch import ToolDispatch

logger = logging.getLogger(__name__)
router = APIRouter(tags=["mcp"])


class _InvalidParams(Exception):
    pass


@router.post("/mcp")
async def mcp_endpoint(
    request: Request, dispatch: ToolDispatch = Depends(get_dispatch),
):
    try:
        body = json.loads(await request.body())
    except ValueError:
        return JSONResponse(rpc_error(None, PARSE_ERROR, "Parse error"))

    try:
        rpc = JsonRpcRequest.model_validate(body)
    except ValidationError:
        request_id = body.get("id") if isinstance(body, dict) else None
        return JSONResponse(rpc_error(request_id, INVALID_REQUEST, "Invalid Request"))

    if rpc.is_notification:
        logger.debug(f"MCP notification {rpc.method}", extra={"rpc_method": rpc.method})
        return Response(status_code=status.HTTP_202_ACCEPTED)

    handler = _METHODS.get(rpc.method)
    if handler is None:
        return JSONResponse(rpc_error(
            rpc.id, METHOD_NOT_FOUND, f"Method not found: {rpc.method}",
        ))
    try:
        result = await handler(rpc.params or {}, dispatch)
    except _InvalidParams as e:
        return JSONResponse(rpc_error(rpc.id, INVALID_PARAMS, str(e)))
    return JSONResponse(rpc_result(rpc.id, result))


async def _initialize(params: dict, dispatch: ToolDispatch) -> dict:
    settings = get_settings()
    requested = params.get("protocolVersion")
    version = (
        requested if requested in SUPPORTED_PROTOCOL_VERSIONS
        else LATEST_PROTOCOL_VERSION
    )
    return {
        "protocolVersion": version,
        "capabilities": {"tools": {"listChanged": False}},
        "serverInfo": {
            "name": settings.server_name,
            "version": settings.server_version,
        },
    }


async def _ping(params: dict, dispatch: ToolDispatch) -> dict:
    return {}


async def _tools_list(params: dict, dispatch: ToolDispatch) -> dict:
    return {"tools": dispatch.registry.list_tools()}


async def _tools_call(params: dict, dispatch: ToolDispatch) -> dict:
    try:
        call = ToolCallParams.model_validate(params)
    except ValidationError:
        raise _InvalidParams("tools/call requires a string 'name'")
    logger.info(
        f"tools/call {call.name}",
        extra={"rpc_method": "tools/call", "tool_name": call.name},
    )
    result = await dispatch.execute(call.name, call.arguments)
    return result.to_dict()


_METHODS = {
    "initialize": _initialize,
    "ping": _ping,
    "tools/list": _tools_list,
    "tools/call": _tools_call,
}

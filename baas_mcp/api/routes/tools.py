"""Tool Routes: REST access to the tool catalogue and dispatcher.

Invariants:
    - POST /call always answers 200 with a ToolResult envelope; unknown tools,
      bad arguments and backend failures are reported inside it (isError=true)
    - GET lists tools in catalogue declaration order
    - GET /{tool_name} describes one tool; an unknown name raises UnknownToolError,
      answered 404 by the global domain error handler

Design Decisions:
    - Thin routes delegate to ToolDispatch (ADR: impureim sandwich)
"""

import logging

from fastapi import APIRouter, Depends

from baas_mcp.api.dependencies import get_dispatch
from baas_mcp.core.errors import ErrorContext, UnknownToolError
from baas_mcp.schemas.tool_call import (
    ToolCallRequest, ToolInfoOut, ToolListOut, ToolResultOut,
)
from baas_mcp.services.tool_dispatch import ToolDispatch

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


@router.get("", response_model=ToolListOut)
async def list_tools(dispatch: ToolDispatch = Depends(get_dispatch)):
    return {"tools": dispatch.registry.list_tools()}


@router.get("/{tool_name}", response_model=ToolInfoOut)
async def get_tool(tool_name: str, dispatch: ToolDispatch = Depends(get_dispatch)):
    definition = dispatch.registry.lookup(tool_name)
    if definition is None:
        raise UnknownToolError(tool_name, ErrorContext(tool_name=tool_name))
    return definition.to_mcp_tool()


@router.post(
    "/{tool_name}/call",
    response_model=ToolResultOut,
    response_model_exclude_none=True,
)
async def call_tool(
    tool_name: str,
    body: ToolCallRequest | None = None,
    dispatch: ToolDispatch = Depends(get_dispatch),
):
    arguments = body.arguments if body else None
    result = await dispatch.execute(tool_name, arguments)
    return result.to_dict()

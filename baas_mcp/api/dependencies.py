"""API Dependencies: access to process-wide objects built in the lifespan."""

from fastapi import Request

from baas_mcp.services.tool_dispatch import ToolDispatch


def get_dispatch(request: Request) -> ToolDispatch:
    """The single ToolDispatch created at startup (app.state.dispatch)."""
    return request.app.state.dispatch

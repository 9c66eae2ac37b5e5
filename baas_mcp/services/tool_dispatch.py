"""Tool Dispatch: lookup, validate, invoke, and normalize every tool call into a ToolResult.

Invariants:
    - execute() never raises (CancelledError aside): every path returns a ToolResult
    - Unknown tools return an error envelope; nothing is invoked
    - Validation failures return an error envelope naming the first violating field;
      the handler (and therefore the backend) is never touched
    - Handler failures return the tool's fixed failure sentence with isError=true;
      the raw backend error goes to the log only
    - A handler returning False is a normal result (status sentence, no isError)

Design Decisions:
    - One normalization step wraps every handler: handlers return plain values and
      never build envelopes or catch exceptions (ADR: no per-handler try/except)
    - Stateless per call: no locks, no ordering between concurrent invocations;
      the shared backend client must tolerate concurrent use (httpx.AsyncClient does)
    - No timeout here: the backend client owns request timeouts
"""

import logging

from baas_mcp.core.errors import (
    BaasAPIError, ToolValidationError, UnknownToolError,
)
from baas_mcp.core.tool_registry import ToolDefinition, ToolRegistry
from baas_mcp.core.tool_result import ToolResult
from baas_mcp.core.tool_schema import validate_arguments

logger = logging.getLogger(__name__)


class ToolDispatch:
    """Routes tool_name -> registered definition. Never raises outward."""

    def __init__(self, registry: ToolRegistry):
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def execute(self, tool_name: str, arguments: object = None) -> ToolResult:
        """Run one invocation end to end. Returns the envelope for the caller."""
        definition = self._registry.lookup(tool_name)
        if definition is None:
            error = UnknownToolError(tool_name)
            logger.warning(
                error.message,
                extra={"tool_name": tool_name, "error_code": error.code},
            )
            return ToolResult.error(error.message)

        try:
            args = validate_arguments(definition.input_schema, arguments)
        except ToolValidationError as e:
            logger.warning(
                f"Rejected call to '{tool_name}': {e.message}",
                extra={
                    "tool_name": tool_name,
                    "tool_category": definition.category.value,
                    "error_code": e.code,
                },
            )
            return ToolResult.error(
                f"Invalid arguments for tool {tool_name}: {e.message}",
            )

        return await self._invoke(definition, args)

    async def _invoke(self, definition: ToolDefinition, args: dict) -> ToolResult:
        try:
            value = await definition.handler(args)
            text = definition.render(value)
        except BaasAPIError as e:
            logger.error(
                f"{definition.failure_message}: {e.message}",
                extra={
                    "tool_name": definition.name,
                    "tool_category": definition.category.value,
                    "backend_call": e.context.backend_call,
                    "error_code": e.code,
                    "status_code": e.status_code,
                },
            )
            return ToolResult.error(definition.failure_message)
        except Exception as e:
            logger.error(
                f"{definition.failure_message}: {e}",
                extra={
                    "tool_name": definition.name,
                    "tool_category": definition.category.value,
                    "error_code": "HANDLER_ERROR",
                },
                exc_info=True,
            )
            return ToolResult.error(definition.failure_message)
        return ToolResult.text(text)

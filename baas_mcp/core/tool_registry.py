"""Tool Registry: name -> ToolDefinition mapping, built once and frozen.

Invariants:
    - Tool names are unique across the registry (duplicate -> ToolRegistrationError)
    - After freeze() no entries are added; register() raises
    - lookup() never raises for an unknown name: returns None
    - Insertion order preserved: tools/list reports the catalogue in declaration order

Design Decisions:
    - "Not found" is an expected runtime condition, so lookup returns None instead
      of raising; registration errors are programming errors and fatal at startup
    - ToolDefinition frozen: definitions are shared across concurrent invocations
"""

from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass
from typing import Any

from baas_mcp.core.domain_types import ToolCategory
from baas_mcp.core.errors import ToolRegistrationError
from baas_mcp.core.format_results import Renderer
from baas_mcp.core.tool_schema import ToolSchema

ToolHandler = Callable[[dict], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDefinition:
    """One catalogue row: contract + handler + result shaping."""
    name: str
    description: str
    input_schema: ToolSchema
    handler: ToolHandler
    render: Renderer
    failure_message: str
    category: ToolCategory = ToolCategory.DIAGNOSTIC

    def to_mcp_tool(self) -> dict:
        """Shape advertised to the agent via tools/list."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema.to_json_schema(),
        }


class ToolRegistry:
    """Read-only (after freeze) catalogue of tool definitions."""

    def __init__(self):
        self._tools: dict[str, ToolDefinition] = {}
        self._frozen = False

    def register(self, definition: ToolDefinition) -> None:
        if self._frozen:
            raise ToolRegistrationError(
                f"Registry is frozen; cannot register '{definition.name}'",
                definition.name,
            )
        if definition.name in self._tools:
            raise ToolRegistrationError(
                f"Tool '{definition.name}' is already registered",
                definition.name,
            )
        self._tools[definition.name] = definition

    def lookup(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def freeze(self) -> "ToolRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> list[str]:
        return list(self._tools)

    def list_tools(self) -> list[dict]:
        """tools/list payload in declaration order."""
        return [d.to_mcp_tool() for d in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

"""Tool Result: the uniform response envelope returned for every invocation.

Invariants:
    - content is never empty: every constructor emits exactly one text block
    - isError is omitted from the wire form when false

Design Decisions:
    - Frozen dataclasses: a result is built once and embedded in one response
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextContent:
    text: str
    type: str = "text"

    def to_dict(self) -> dict:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolResult:
    content: tuple[TextContent, ...] = field(default_factory=tuple)
    is_error: bool = False

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls(content=(TextContent(text),))

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(content=(TextContent(text),), is_error=True)

    def to_dict(self) -> dict:
        """Wire form: {"content": [...], "isError": true} (flag only when set)."""
        payload: dict = {"content": [block.to_dict() for block in self.content]}
        if self.is_error:
            payload["isError"] = True
        return payload

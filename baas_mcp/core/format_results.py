"""Result Formatting: shapes a handler's raw value into the envelope's text.

Invariants:
    - Every renderer is pure: value in, str out
    - Structured data rendered in full (no truncation, no field filtering)
    - status_message(): false is a normal sentence, never an error flag

Design Decisions:
    - Renderers are factories returning closures: each catalogue row picks one,
      so handlers never format text themselves
    - json.dumps(indent=2, ensure_ascii=False): same layout the agent sees from
      the Meeting BaaS API; default=str keeps datetimes/UUIDs printable
"""

import json
from collections.abc import Callable
from typing import Any

Renderer = Callable[[Any], str]


def to_json_text(value: Any) -> str:
    """Pretty JSON serialization of the full structure."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def json_dump(prefix: str = "") -> Renderer:
    """Render structured data as pretty JSON, optionally after a prefix."""
    def render(value: Any) -> str:
        return f"{prefix}{to_json_text(value)}"
    return render


def status_message(success: str, failure: str) -> Renderer:
    """Render a boolean outcome as a fixed sentence."""
    def render(value: Any) -> str:
        return success if value else failure
    return render


def fixed_message(text: str) -> Renderer:
    """Render a void outcome: the backend value is discarded."""
    def render(value: Any) -> str:
        return text
    return render


def with_value(prefix: str) -> Renderer:
    """Render a scalar (e.g. an ID) appended to a sentence."""
    def render(value: Any) -> str:
        return f"{prefix}{value}"
    return render

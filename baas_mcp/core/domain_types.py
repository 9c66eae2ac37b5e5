"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - BotId, CalendarUuid, EventUuid wrap str: backend identifiers are opaque strings
    - All valid states encoded as Enums: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (ADR: tool results are JSON text)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BotId = NewType("BotId", str)
CalendarUuid = NewType("CalendarUuid", str)
EventUuid = NewType("EventUuid", str)


# ─── Enums ───────────────────────────────────────────────────────

class FieldKind(str, Enum):
    """Primitive constraint carried by every schema field."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    MAP = "map"


class CalendarPlatform(str, Enum):
    """Calendar providers accepted by Meeting BaaS."""
    GOOGLE = "Google"
    MICROSOFT = "Microsoft"


class ToolCategory(str, Enum):
    """Tool groupings for registry and observability."""
    MEETING = "meeting"
    CALENDAR = "calendar"
    EVENT = "event"
    DIAGNOSTIC = "diagnostic"


# Requested on joinMeeting when speechToText is true
DEFAULT_SPEECH_TO_TEXT_PROVIDER = "Default"

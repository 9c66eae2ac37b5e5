"""Calendar Event Tool Schemas: list events and (un)schedule recordings.

Invariants:
    - scheduleRecordEvent.extra is an opaque map, forwarded unvalidated
"""

from baas_mcp.core.domain_types import ToolCategory
from baas_mcp.core.format_results import fixed_message, json_dump
from baas_mcp.core.tool_schema import ToolSchema, mapping, string

TOOLS_EVENT = [
    {
        "name": "listEvents",
        "description": (
            "View all events in a calendar. Use this when you want to: 1) See "
            "upcoming meetings 2) View past meetings 3) Check meeting "
            "schedules 4) Browse calendar events"
        ),
        "input_schema": ToolSchema((string("calendarUuid"),)),
        "render": json_dump(),
        "failure_message": "Failed to list events",
        "category": ToolCategory.EVENT,
    },
    {
        "name": "scheduleRecordEvent",
        "description": (
            "Schedule a bot to automatically record a future meeting. Use this "
            "when you want to: 1) Set up automatic recording 2) Schedule future "
            "transcriptions 3) Plan meeting recordings 4) Enable recurring "
            "recordings"
        ),
        "input_schema": ToolSchema((
            string("eventUuid"),
            string("botName"),
            mapping("extra", required=False),
        )),
        "render": fixed_message("Successfully scheduled event recording"),
        "failure_message": "Failed to schedule event recording",
        "category": ToolCategory.EVENT,
    },
    {
        "name": "unscheduleRecordEvent",
        "description": (
            "Cancel a scheduled recording for a meeting. Use this when you want "
            "to: 1) Stop automatic recording 2) Cancel future transcriptions "
            "3) Remove scheduled recordings 4) Disable recurring recordings"
        ),
        "input_schema": ToolSchema((string("eventUuid"),)),
        "render": fixed_message("Successfully unscheduled event recording"),
        "failure_message": "Failed to unschedule event recording",
        "category": ToolCategory.EVENT,
    },
]

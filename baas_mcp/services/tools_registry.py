"""Tools Registry: binds every define_*_tools row to its handler and freezes the catalogue.

Invariants:
    - Every tool->handler mapping is visible: no getattr magic, no auto-discovery
    - Every row in ALL_TOOLS has exactly one handler, and vice versa
    - build_registry() returns a frozen registry: no tools added after startup
    - The backend client is injected once and shared by all handlers

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
      (ADR: no convention-over-config)
    - Split handlers by resource: meeting / calendar / event / diagnostic
      (ADR: no god objects)
"""

from baas_mcp.core.errors import ToolRegistrationError
from baas_mcp.core.tool_registry import ToolDefinition, ToolRegistry
from baas_mcp.infrastructure.baas_client import BaasClient
from baas_mcp.services.define_calendar_tools import TOOLS_CALENDAR
from baas_mcp.services.define_diagnostic_tools import TOOLS_DIAGNOSTIC
from baas_mcp.services.define_event_tools import TOOLS_EVENT
from baas_mcp.services.define_meeting_tools import TOOLS_MEETING
from baas_mcp.services.handle_calendar import CalendarHandlers
from baas_mcp.services.handle_diagnostic import DiagnosticHandlers
from baas_mcp.services.handle_event import EventHandlers
from baas_mcp.services.handle_meeting import MeetingHandlers

ALL_TOOLS: list[dict] = [
    *TOOLS_MEETING,       # 5 tools
    *TOOLS_CALENDAR,      # 6 tools
    *TOOLS_EVENT,         # 3 tools
    *TOOLS_DIAGNOSTIC,    # 1 tool
]
# Total: 15


def _bind_handlers(client: BaasClient) -> dict:
    meeting = MeetingHandlers(client)
    calendar = CalendarHandlers(client)
    event = EventHandlers(client)
    diagnostic = DiagnosticHandlers()

    # ADR: every mapping explicit: adding a tool requires editing this dict
    return {
        # Meetings (5 tools)
        "joinMeeting": meeting.join_meeting,
        "leaveMeeting": meeting.leave_meeting,
        "getMeetingData": meeting.get_meeting_data,
        "deleteData": meeting.delete_data,
        "botsWithMetadata": meeting.bots_with_metadata,

        # Calendars (6 tools)
        "createCalendar": calendar.create_calendar,
        "listCalendars": calendar.list_calendars,
        "getCalendar": calendar.get_calendar,
        "updateCalendar": calendar.update_calendar,
        "deleteCalendar": calendar.delete_calendar,
        "resyncAllCalendars": calendar.resync_all_calendars,

        # Calendar events (3 tools)
        "listEvents": event.list_events,
        "scheduleRecordEvent": event.schedule_record_event,
        "unscheduleRecordEvent": event.unschedule_record_event,

        # Diagnostics (1 tool)
        "echo": diagnostic.echo,
    }


def build_registry(client: BaasClient) -> ToolRegistry:
    """Build the complete, frozen tool catalogue around one shared client."""
    handlers = _bind_handlers(client)
    registry = ToolRegistry()
    for row in ALL_TOOLS:
        handler = handlers.pop(row["name"], None)
        if handler is None:
            raise ToolRegistrationError(
                f"No handler bound for tool '{row['name']}'", row["name"],
            )
        registry.register(ToolDefinition(handler=handler, **row))
    if handlers:
        orphan = sorted(handlers)[0]
        raise ToolRegistrationError(
            f"Handler bound for undeclared tool '{orphan}'", orphan,
        )
    return registry.freeze()

"""Calendar Tool Schemas: calendar connection CRUD and resync.

Invariants:
    - platform is an enum of CalendarPlatform values: anything else rejected
      before reaching the backend
    - createCalendar requires every credential; updateCalendar requires only uuid

Design Decisions:
    - deleteCalendar renders a boolean status: a false result is reported as a
      normal message, only a raised failure flags isError
"""

from baas_mcp.core.domain_types import CalendarPlatform, ToolCategory
from baas_mcp.core.format_results import fixed_message, json_dump, status_message
from baas_mcp.core.tool_schema import ToolSchema, one_of, string

_PLATFORMS = tuple(p.value for p in CalendarPlatform)

TOOLS_CALENDAR = [
    {
        "name": "createCalendar",
        "description": (
            "Connect a Google or Microsoft calendar to Meeting BaaS. Use this "
            "when you want to: 1) Link your work calendar 2) Enable automatic "
            "meeting recordings 3) Schedule bots for future meetings "
            "4) Sync your calendar events"
        ),
        "input_schema": ToolSchema((
            string("oauthClientId"),
            string("oauthClientSecret"),
            string("oauthRefreshToken"),
            one_of("platform", _PLATFORMS),
            string("rawCalendarId"),
        )),
        "render": json_dump("Successfully created calendar: "),
        "failure_message": "Failed to create calendar",
        "category": ToolCategory.CALENDAR,
    },
    {
        "name": "listCalendars",
        "description": (
            "View all connected calendars. Use this when you want to: 1) See "
            "which calendars are linked 2) Check calendar connection status "
            "3) View calendar details 4) Manage calendar integrations"
        ),
        "input_schema": ToolSchema(),
        "render": json_dump(),
        "failure_message": "Failed to list calendars",
        "category": ToolCategory.CALENDAR,
    },
    {
        "name": "getCalendar",
        "description": (
            "Get detailed information about a specific calendar. Use this when "
            "you want to: 1) View calendar settings 2) Check sync status "
            "3) See calendar events 4) Verify calendar connection"
        ),
        "input_schema": ToolSchema((string("uuid"),)),
        "render": json_dump(),
        "failure_message": "Failed to get calendar",
        "category": ToolCategory.CALENDAR,
    },
    {
        "name": "updateCalendar",
        "description": (
            "Update calendar connection settings. Use this when you want to: "
            "1) Refresh calendar access 2) Update calendar credentials "
            "3) Change calendar settings 4) Fix connection issues"
        ),
        "input_schema": ToolSchema((
            string("uuid"),
            string("oauthClientId", required=False),
            string("oauthClientSecret", required=False),
            string("oauthRefreshToken", required=False),
            one_of("platform", _PLATFORMS, required=False),
            string("rawCalendarId", required=False),
        )),
        "render": json_dump("Successfully updated calendar: "),
        "failure_message": "Failed to update calendar",
        "category": ToolCategory.CALENDAR,
    },
    {
        "name": "deleteCalendar",
        "description": (
            "Remove a calendar connection. Use this when you want to: "
            "1) Unlink a calendar 2) Stop automatic recordings "
            "3) Remove calendar access 4) Clean up old integrations"
        ),
        "input_schema": ToolSchema((string("uuid"),)),
        "render": status_message(
            "Successfully deleted calendar", "Failed to delete calendar",
        ),
        "failure_message": "Failed to delete calendar",
        "category": ToolCategory.CALENDAR,
    },
    {
        "name": "resyncAllCalendars",
        "description": (
            "Refresh all calendar data to ensure it's up to date. Use this when "
            "you want to: 1) Update meeting schedules 2) Sync new calendar "
            "changes 3) Refresh calendar data 4) Fix sync issues"
        ),
        "input_schema": ToolSchema(),
        "render": fixed_message("Successfully resynced all calendars"),
        "failure_message": "Failed to resync calendars",
        "category": ToolCategory.CALENDAR,
    },
]

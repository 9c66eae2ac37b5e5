"""Meeting Tool Schemas: bot lifecycle, meeting data, and bot search.

Invariants:
    - Field names and optionality are the wire contract advertised to the agent
    - Each row names the fixed failure sentence returned when its backend call fails
    - Rows carry no handler: tools_registry binds handlers explicitly

Design Decisions:
    - joinMeeting.reserved is required (no default): the agent must decide whether
      to use a reserved bot rather than silently get one
    - botsWithMetadata has no required field: an empty call lists recent bots
"""

from baas_mcp.core.domain_types import ToolCategory
from baas_mcp.core.format_results import (
    fixed_message, json_dump, status_message, with_value,
)
from baas_mcp.core.tool_schema import ToolSchema, boolean, number, string

TOOLS_MEETING = [
    {
        "name": "joinMeeting",
        "description": (
            "Send an AI bot to join a video meeting. The bot can record the "
            "meeting, transcribe speech, and provide real-time audio streams. "
            "Use this when you want to: 1) Record a meeting 2) Get meeting "
            "transcriptions 3) Stream meeting audio 4) Monitor meeting attendance"
        ),
        "input_schema": ToolSchema((
            string("meetingUrl"),
            string("botName"),
            string("webhookUrl", required=False),
            string("recordingMode", required=False),
            boolean("speechToText", required=False),
            boolean("reserved"),
        )),
        "render": with_value("Successfully joined meeting with bot ID: "),
        "failure_message": "Failed to join meeting",
        "category": ToolCategory.MEETING,
    },
    {
        "name": "leaveMeeting",
        "description": (
            "Remove an AI bot from a meeting. Use this when you want to: "
            "1) End a meeting recording 2) Stop transcription "
            "3) Disconnect the bot from the meeting"
        ),
        "input_schema": ToolSchema((string("botId"),)),
        "render": status_message(
            "Successfully left meeting", "Failed to leave meeting",
        ),
        "failure_message": "Failed to leave meeting",
        "category": ToolCategory.MEETING,
    },
    {
        "name": "getMeetingData",
        "description": (
            "Get all data from a meeting including recording, transcript, and "
            "metadata. Use this when you want to: 1) Search through meeting "
            "transcripts 2) Get meeting recordings 3) Review meeting details "
            "4) Access speaker information"
        ),
        "input_schema": ToolSchema((string("botId"),)),
        "render": json_dump(),
        "failure_message": "Failed to get meeting data",
        "category": ToolCategory.MEETING,
    },
    {
        "name": "deleteData",
        "description": (
            "Delete all data from a meeting including recording, transcript, "
            "and logs. Use this when you want to: 1) Remove sensitive meeting "
            "data 2) Clear meeting recordings 3) Delete transcripts "
            "4) Free up storage space"
        ),
        "input_schema": ToolSchema((string("botId"),)),
        "render": fixed_message("Successfully deleted meeting data"),
        "failure_message": "Failed to delete meeting data",
        "category": ToolCategory.MEETING,
    },
    {
        "name": "botsWithMetadata",
        "description": (
            "Search and filter through your meeting bots. Use this when you "
            "want to: 1) Find specific meetings 2) Filter by date range "
            "3) Search by meeting name 4) View meeting history"
        ),
        "input_schema": ToolSchema((
            string("botName", required=False),
            string("createdAfter", required=False),
            string("createdBefore", required=False),
            string("cursor", required=False),
            string("filterByExtra", required=False),
            number("limit", required=False),
            string("meetingUrl", required=False),
            string("sortByExtra", required=False),
            string("speakerName", required=False),
        )),
        "render": json_dump(),
        "failure_message": "Failed to get bots with metadata",
        "category": ToolCategory.MEETING,
    },
]

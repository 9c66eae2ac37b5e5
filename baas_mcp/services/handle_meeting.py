"""Meeting Handlers: joinMeeting, leaveMeeting, getMeetingData, deleteData, botsWithMetadata.

Invariants:
    - Each method performs exactly one backend call and returns its raw value
    - Arguments arrive already validated (required keys present, types checked)
    - No envelope formatting and no exception handling here: ToolDispatch owns both

Design Decisions:
    - speech-to-text requested only when speechToText is true; absent/false sends
      nothing so the API default applies
"""

from baas_mcp.core.domain_types import BotId, DEFAULT_SPEECH_TO_TEXT_PROVIDER
from baas_mcp.infrastructure.baas_client import BaasClient


class MeetingHandlers:
    """Bot lifecycle and meeting data tools."""

    def __init__(self, client: BaasClient):
        self.client = client

    async def join_meeting(self, args: dict) -> BotId:
        speech_to_text = (
            {"provider": DEFAULT_SPEECH_TO_TEXT_PROVIDER}
            if args.get("speechToText") else None
        )
        return await self.client.join_meeting(
            meeting_url=args["meetingUrl"],
            bot_name=args["botName"],
            reserved=args["reserved"],
            webhook_url=args.get("webhookUrl"),
            recording_mode=args.get("recordingMode"),
            speech_to_text=speech_to_text,
        )

    async def leave_meeting(self, args: dict) -> bool:
        return await self.client.leave_meeting(BotId(args["botId"]))

    async def get_meeting_data(self, args: dict):
        return await self.client.get_meeting_data(BotId(args["botId"]))

    async def delete_data(self, args: dict):
        return await self.client.delete_data(BotId(args["botId"]))

    async def bots_with_metadata(self, args: dict):
        """Search bots; every filter is optional."""
        return await self.client.list_recent_bots(
            bot_name=args.get("botName"),
            created_after=args.get("createdAfter"),
            created_before=args.get("createdBefore"),
            cursor=args.get("cursor"),
            filter_by_extra=args.get("filterByExtra"),
            limit=args.get("limit"),
            meeting_url=args.get("meetingUrl"),
            sort_by_extra=args.get("sortByExtra"),
            speaker_name=args.get("speakerName"),
        )

"""Calendar Event Handlers: listEvents, scheduleRecordEvent, unscheduleRecordEvent."""

from baas_mcp.core.domain_types import CalendarUuid, EventUuid
from baas_mcp.infrastructure.baas_client import BaasClient


class EventHandlers:
    """Calendar event tools."""

    def __init__(self, client: BaasClient):
        self.client = client

    async def list_events(self, args: dict):
        return await self.client.list_events(CalendarUuid(args["calendarUuid"]))

    async def schedule_record_event(self, args: dict):
        return await self.client.schedule_record_event(
            EventUuid(args["eventUuid"]),
            bot_name=args["botName"],
            extra=args.get("extra"),
        )

    async def unschedule_record_event(self, args: dict):
        return await self.client.unschedule_record_event(EventUuid(args["eventUuid"]))

"""Calendar Handlers: create/list/get/update/delete calendars and resync.

Invariants:
    - updateCalendar forwards only supplied fields (partial update)
    - platform forwarded as validated; never defaulted
"""

from baas_mcp.core.domain_types import CalendarUuid
from baas_mcp.infrastructure.baas_client import BaasClient


class CalendarHandlers:
    """Calendar connection tools."""

    def __init__(self, client: BaasClient):
        self.client = client

    async def create_calendar(self, args: dict):
        return await self.client.create_calendar(
            oauth_client_id=args["oauthClientId"],
            oauth_client_secret=args["oauthClientSecret"],
            oauth_refresh_token=args["oauthRefreshToken"],
            platform=args["platform"],
            raw_calendar_id=args["rawCalendarId"],
        )

    async def list_calendars(self, args: dict):
        return await self.client.list_calendars()

    async def get_calendar(self, args: dict):
        return await self.client.get_calendar(CalendarUuid(args["uuid"]))

    async def update_calendar(self, args: dict):
        return await self.client.update_calendar(
            CalendarUuid(args["uuid"]),
            oauth_client_id=args.get("oauthClientId"),
            oauth_client_secret=args.get("oauthClientSecret"),
            oauth_refresh_token=args.get("oauthRefreshToken"),
            platform=args.get("platform"),
            raw_calendar_id=args.get("rawCalendarId"),
        )

    async def delete_calendar(self, args: dict) -> bool:
        return await self.client.delete_calendar(CalendarUuid(args["uuid"]))

    async def resync_all_calendars(self, args: dict):
        return await self.client.resync_all_calendars()

"""Meeting BaaS Client: async HTTP wrapper over the Meeting BaaS REST API.

Invariants:
    - One shared httpx.AsyncClient per process (created at startup, closed at shutdown)
    - Every coroutine performs exactly one HTTP request
    - All failures mapped to BaasAPIError (core/errors.py): timeout, connection,
      HTTP status, invalid JSON
    - No retries: a failed call surfaces immediately to the dispatcher
    - Caller-supplied identifiers are escaped as a single path segment; "." and
      ".." are refused before any request is sent

Design Decisions:
    - Wrapper over raw httpx: isolates wire details (snake_case bodies, auth header)
      from handlers, which speak in tool-level arguments (ADR: single responsibility)
    - None-valued optionals dropped before sending: the API treats absent and null
      differently for some fields
    - transport injectable: tests use httpx.MockTransport, production uses the default
"""

import logging
import time
from typing import Any
from urllib.parse import quote

import httpx

from baas_mcp.core.domain_types import BotId, CalendarUuid, EventUuid
from baas_mcp.core.errors import BaasAPIError, ErrorContext

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-meeting-baas-api-key"


def _compact(data: dict) -> dict:
    return {k: v for k, v in data.items() if v is not None}


def _segment(value: str, backend_call: str) -> str:
    """Escape an identifier as exactly one URL path segment."""
    if value in ("", ".", ".."):
        raise BaasAPIError(
            f"invalid identifier {value!r}", "invalid_request",
            context=ErrorContext(backend_call=backend_call),
        )
    return quote(value, safe="")


class BaasClient:
    """Meeting BaaS API client: bots, calendars, calendar events."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.meetingbaas.com",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url,
            headers={API_KEY_HEADER: api_key, "Accept": "application/json"},
            timeout=timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    # ─── Bots ────────────────────────────────────────────────────

    async def join_meeting(
        self,
        *,
        meeting_url: str,
        bot_name: str,
        reserved: bool,
        webhook_url: str | None = None,
        recording_mode: str | None = None,
        speech_to_text: dict | None = None,
    ) -> BotId:
        """Send a bot into a meeting. Returns the new bot ID."""
        payload = await self._request(
            "POST", "/bots", "join_meeting",
            json=_compact({
                "meeting_url": meeting_url,
                "bot_name": bot_name,
                "reserved": reserved,
                "webhook_url": webhook_url,
                "recording_mode": recording_mode,
                "speech_to_text": speech_to_text,
            }),
        )
        if not isinstance(payload, dict) or "bot_id" not in payload:
            raise BaasAPIError(
                "join response has no bot_id", "invalid_response",
                context=ErrorContext(backend_call="join_meeting"),
            )
        return BotId(str(payload["bot_id"]))

    async def leave_meeting(self, bot_id: BotId) -> bool:
        segment = _segment(bot_id, "leave_meeting")
        payload = await self._request("DELETE", f"/bots/{segment}", "leave_meeting")
        if isinstance(payload, dict):
            return bool(payload.get("ok", False))
        return True

    async def get_meeting_data(self, bot_id: BotId) -> Any:
        return await self._request(
            "GET", "/bots/meeting_data", "get_meeting_data",
            params={"bot_id": bot_id},
        )

    async def delete_data(self, bot_id: BotId) -> Any:
        segment = _segment(bot_id, "delete_data")
        return await self._request(
            "POST", f"/bots/{segment}/delete_data", "delete_data",
        )

    async def list_recent_bots(
        self,
        *,
        bot_name: str | None = None,
        created_after: str | None = None,
        created_before: str | None = None,
        cursor: str | None = None,
        filter_by_extra: str | None = None,
        limit: int | float | None = None,
        meeting_url: str | None = None,
        sort_by_extra: str | None = None,
        speaker_name: str | None = None,
    ) -> Any:
        """Search bots with metadata. Cursor-paginated."""
        return await self._request(
            "GET", "/bots/bots_with_metadata", "list_recent_bots",
            params=_compact({
                "bot_name": bot_name,
                "created_after": created_after,
                "created_before": created_before,
                "cursor": cursor,
                "filter_by_extra": filter_by_extra,
                "limit": limit,
                "meeting_url": meeting_url,
                "sort_by_extra": sort_by_extra,
                "speaker_name": speaker_name,
            }),
        )

    # ─── Calendars ───────────────────────────────────────────────

    async def create_calendar(
        self,
        *,
        oauth_client_id: str,
        oauth_client_secret: str,
        oauth_refresh_token: str,
        platform: str,
        raw_calendar_id: str,
    ) -> Any:
        payload = await self._request(
            "POST", "/calendars", "create_calendar",
            json={
                "oauth_client_id": oauth_client_id,
                "oauth_client_secret": oauth_client_secret,
                "oauth_refresh_token": oauth_refresh_token,
                "platform": platform,
                "raw_calendar_id": raw_calendar_id,
            },
        )
        return _unwrap_calendar(payload)

    async def list_calendars(self) -> Any:
        return await self._request("GET", "/calendars", "list_calendars")

    async def get_calendar(self, uuid: CalendarUuid) -> Any:
        segment = _segment(uuid, "get_calendar")
        return await self._request("GET", f"/calendars/{segment}", "get_calendar")

    async def update_calendar(
        self,
        uuid: CalendarUuid,
        *,
        oauth_client_id: str | None = None,
        oauth_client_secret: str | None = None,
        oauth_refresh_token: str | None = None,
        platform: str | None = None,
        raw_calendar_id: str | None = None,
    ) -> Any:
        """Partial update: only supplied fields are sent."""
        segment = _segment(uuid, "update_calendar")
        payload = await self._request(
            "PATCH", f"/calendars/{segment}", "update_calendar",
            json=_compact({
                "oauth_client_id": oauth_client_id,
                "oauth_client_secret": oauth_client_secret,
                "oauth_refresh_token": oauth_refresh_token,
                "platform": platform,
                "raw_calendar_id": raw_calendar_id,
            }),
        )
        return _unwrap_calendar(payload)

    async def delete_calendar(self, uuid: CalendarUuid) -> bool:
        segment = _segment(uuid, "delete_calendar")
        await self._request("DELETE", f"/calendars/{segment}", "delete_calendar")
        return True

    async def resync_all_calendars(self) -> Any:
        return await self._request(
            "POST", "/internal/calendar/resync_all", "resync_all_calendars",
        )

    # ─── Calendar events ─────────────────────────────────────────

    async def list_events(self, calendar_uuid: CalendarUuid) -> Any:
        return await self._request(
            "GET", "/calendar_events", "list_events",
            params={"calendar_id": calendar_uuid},
        )

    async def schedule_record_event(
        self, event_uuid: EventUuid, *, bot_name: str, extra: dict | None = None,
    ) -> Any:
        segment = _segment(event_uuid, "schedule_record_event")
        return await self._request(
            "POST", f"/calendar_events/{segment}/bot", "schedule_record_event",
            json=_compact({"bot_name": bot_name, "extra": extra}),
        )

    async def unschedule_record_event(self, event_uuid: EventUuid) -> Any:
        segment = _segment(event_uuid, "unschedule_record_event")
        return await self._request(
            "DELETE", f"/calendar_events/{segment}/bot",
            "unschedule_record_event",
        )

    # ─── Transport ───────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        path: str,
        backend_call: str,
        *,
        json: dict | None = None,
        params: dict | None = None,
    ) -> Any:
        """Send one request; return decoded JSON (None for an empty body)."""
        context = ErrorContext(backend_call=backend_call)
        started = time.perf_counter()
        try:
            response = await self.client.request(
                method, path, json=json, params=params,
            )
            response.raise_for_status()
        except httpx.TimeoutException:
            raise BaasAPIError("request timed out", "timeout", context=context)
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise BaasAPIError(
                f"HTTP {status_code}: {e.response.text[:500]}",
                "http_status", status_code=status_code, context=context,
            )
        except httpx.RequestError as e:
            raise BaasAPIError(
                f"connection error: {e}", "connection_error", context=context,
            )

        logger.debug(
            f"Meeting BaaS {method} {path} -> {response.status_code}",
            extra={
                "backend_call": backend_call,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            raise BaasAPIError(
                "response body is not valid JSON", "invalid_response",
                status_code=response.status_code, context=context,
            )


def _unwrap_calendar(payload: Any) -> Any:
    """Calendar create/update responses nest the record under 'calendar'."""
    if isinstance(payload, dict) and "calendar" in payload:
        return payload["calendar"]
    return payload

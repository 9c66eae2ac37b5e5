"""Meeting BaaS Client: tests for request mapping and error mapping.

Tests cover:
    - Method, path, auth header, snake_case bodies, None-valued fields dropped
    - Identifiers escaped as a single path segment; dot segments refused
    - Response unwrapping (bot_id, ok, calendar)
    - httpx failures mapped to BaasAPIError: status, timeout, connection, bad JSON

Design Decisions:
    - httpx.MockTransport: exercises the real AsyncClient request pipeline
      without a network
"""

import json

import httpx
import pytest

from baas_mcp.core.errors import BaasAPIError
from baas_mcp.infrastructure.baas_client import API_KEY_HEADER, BaasClient


@pytest.fixture
async def make_client():
    clients = []

    def _make(handler) -> BaasClient:
        c = BaasClient(
            "test-key", base_url="https://baas.test",
            transport=httpx.MockTransport(handler),
        )
        clients.append(c)
        return c

    yield _make
    for c in clients:
        await c.aclose()


def _recorder(status_code: int, **response_kwargs):
    """Handler that records every request and answers with a fresh response."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(status_code, **response_kwargs)

    return handler, seen


@pytest.mark.asyncio
async def test_join_meeting_request_shape(make_client):
    handler, seen = _recorder(200, json={"bot_id": "bot-123"})
    bot_id = await make_client(handler).join_meeting(
        meeting_url="https://meet.example/abc", bot_name="Notetaker",
        reserved=False, speech_to_text={"provider": "Default"},
    )
    assert bot_id == "bot-123"
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/bots"
    assert request.headers[API_KEY_HEADER] == "test-key"
    assert json.loads(request.content) == {
        "meeting_url": "https://meet.example/abc",
        "bot_name": "Notetaker",
        "reserved": False,
        "speech_to_text": {"provider": "Default"},
    }


@pytest.mark.asyncio
async def test_join_meeting_without_bot_id_is_invalid(make_client):
    handler, _ = _recorder(200, json={"status": "queued"})
    with pytest.raises(BaasAPIError) as exc:
        await make_client(handler).join_meeting(
            meeting_url="u", bot_name="b", reserved=False,
        )
    assert exc.value.api_error_type == "invalid_response"


@pytest.mark.asyncio
async def test_leave_meeting_returns_ok_flag(make_client):
    handler, seen = _recorder(200, json={"ok": False})
    assert await make_client(handler).leave_meeting("bot-1") is False
    assert seen[0].method == "DELETE"
    assert seen[0].url.path == "/bots/bot-1"


@pytest.mark.asyncio
async def test_get_meeting_data_query(make_client):
    handler, seen = _recorder(200, json={"mp4": "x"})
    assert await make_client(handler).get_meeting_data("bot-1") == {"mp4": "x"}
    assert seen[0].url.path == "/bots/meeting_data"
    assert seen[0].url.params["bot_id"] == "bot-1"


@pytest.mark.asyncio
async def test_list_recent_bots_drops_absent_filters(make_client):
    handler, seen = _recorder(200, json={"bots": []})
    await make_client(handler).list_recent_bots(bot_name="Notetaker", limit=5)
    params = seen[0].url.params
    assert dict(params) == {"bot_name": "Notetaker", "limit": "5"}


@pytest.mark.asyncio
async def test_update_calendar_sends_only_supplied_fields(make_client):
    handler, seen = _recorder(200, json={"calendar": {"uuid": "cal-1"}})
    result = await make_client(handler).update_calendar(
        "cal-1", platform="Google",
    )
    assert result == {"uuid": "cal-1"}
    assert seen[0].method == "PATCH"
    assert json.loads(seen[0].content) == {"platform": "Google"}


@pytest.mark.asyncio
async def test_delete_calendar_empty_body_is_success(make_client):
    handler, seen = _recorder(200)
    assert await make_client(handler).delete_calendar("cal-1") is True
    assert seen[0].url.path == "/calendars/cal-1"


@pytest.mark.asyncio
async def test_list_events_and_schedule_paths(make_client):
    handler, seen = _recorder(200, json=[])
    client = make_client(handler)
    await client.list_events("cal-1")
    await client.schedule_record_event("evt-1", bot_name="Recorder")
    await client.unschedule_record_event("evt-1")
    assert seen[0].url.params["calendar_id"] == "cal-1"
    assert (seen[1].method, seen[1].url.path) == ("POST", "/calendar_events/evt-1/bot")
    assert json.loads(seen[1].content) == {"bot_name": "Recorder"}
    assert (seen[2].method, seen[2].url.path) == ("DELETE", "/calendar_events/evt-1/bot")


@pytest.mark.asyncio
async def test_identifier_escaped_as_one_path_segment(make_client):
    handler, seen = _recorder(200, json={"ok": True})
    client = make_client(handler)
    await client.leave_meeting("../calendars/cal-1")
    await client.delete_calendar("cal-1?force=1")
    await client.unschedule_record_event("evt/1")
    assert [(r.method, r.url.raw_path) for r in seen] == [
        ("DELETE", b"/bots/..%2Fcalendars%2Fcal-1"),
        ("DELETE", b"/calendars/cal-1%3Fforce%3D1"),
        ("DELETE", b"/calendar_events/evt%2F1/bot"),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("identifier", ["", ".", ".."])
async def test_dot_segment_identifier_refused_without_request(make_client, identifier):
    handler, seen = _recorder(200, json={"ok": True})
    with pytest.raises(BaasAPIError) as exc:
        await make_client(handler).leave_meeting(identifier)
    assert exc.value.api_error_type == "invalid_request"
    assert exc.value.context.backend_call == "leave_meeting"
    assert seen == []


@pytest.mark.asyncio
async def test_http_error_status_mapped(make_client):
    handler, _ = _recorder(404, json={"error": "not found"})
    with pytest.raises(BaasAPIError) as exc:
        await make_client(handler).get_calendar("missing")
    assert exc.value.api_error_type == "http_status"
    assert exc.value.status_code == 404
    assert exc.value.context.backend_call == "get_calendar"


@pytest.mark.asyncio
async def test_timeout_mapped(make_client):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(BaasAPIError) as exc:
        await make_client(handler).list_calendars()
    assert exc.value.api_error_type == "timeout"


@pytest.mark.asyncio
async def test_connection_error_mapped(make_client):
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(BaasAPIError) as exc:
        await make_client(handler).resync_all_calendars()
    assert exc.value.api_error_type == "connection_error"


@pytest.mark.asyncio
async def test_invalid_json_mapped(make_client):
    handler, _ = _recorder(200, content=b"<html>oops</html>")
    with pytest.raises(BaasAPIError) as exc:
        await make_client(handler).list_calendars()
    assert exc.value.api_error_type == "invalid_response"

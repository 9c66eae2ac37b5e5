"""Application Lifespan: one shared BaasClient built on startup and closed on shutdown.

Tests cover:
    - Exactly one client constructed from settings, shared by every handler
    - aclose awaited on shutdown and the dispatcher detached from app.state
    - A dispatcher already on app.state is left alone (no client built)
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from baas_mcp import main
from baas_mcp.config import get_settings
from baas_mcp.infrastructure.baas_client import BaasClient
from baas_mcp.services.tool_dispatch import ToolDispatch


@pytest.fixture
def client_factory(monkeypatch):
    instance = AsyncMock(spec=BaasClient)
    factory = MagicMock(return_value=instance)
    monkeypatch.setattr(main, "BaasClient", factory)
    return factory


@pytest.mark.asyncio
async def test_lifespan_builds_one_shared_client_and_closes_it(client_factory):
    instance = client_factory.return_value
    instance.join_meeting.return_value = "bot-1"
    instance.list_calendars.return_value = []
    app = main.create_app()

    async with main.lifespan(app):
        settings = get_settings()
        client_factory.assert_called_once_with(
            api_key=settings.baas_api_key,
            base_url=settings.baas_api_url,
            timeout_seconds=settings.baas_timeout_seconds,
        )
        dispatch = app.state.dispatch
        assert len(dispatch.registry) == 15

        await dispatch.execute("joinMeeting", {
            "meetingUrl": "https://meet.example/abc",
            "botName": "Notetaker",
            "reserved": False,
        })
        await dispatch.execute("listCalendars", {})
        instance.join_meeting.assert_awaited_once()
        instance.list_calendars.assert_awaited_once()
        instance.aclose.assert_not_awaited()

    instance.aclose.assert_awaited_once()
    assert app.state.dispatch is None
    assert client_factory.call_count == 1


@pytest.mark.asyncio
async def test_lifespan_keeps_preset_dispatcher(client_factory, dispatch):
    app = main.create_app()
    app.state.dispatch = dispatch

    async with main.lifespan(app):
        assert app.state.dispatch is dispatch

    client_factory.assert_not_called()
    assert isinstance(app.state.dispatch, ToolDispatch)

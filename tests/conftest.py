"""Root conftest: shared fixtures: mocked backend client, dispatcher, HTTP client.

Design Decisions:
    - AsyncMock(spec=BaasClient): every backend coroutine is awaitable and
      assertable, and a typo in a method name fails loudly
    - ASGITransport does not run the lifespan: the test dispatcher is placed on
      app.state directly, so no real BaasClient is ever built
"""

import os

# Ensure tests don't accidentally use real API keys
os.environ.setdefault("BAAS_API_KEY", "baas-test-fake-key")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from baas_mcp.infrastructure.baas_client import BaasClient  # noqa: E402
from baas_mcp.main import create_app  # noqa: E402
from baas_mcp.services.tool_dispatch import ToolDispatch  # noqa: E402
from baas_mcp.services.tools_registry import build_registry  # noqa: E402


@pytest.fixture
def mock_client():
    return AsyncMock(spec=BaasClient)


@pytest.fixture
def dispatch(mock_client):
    return ToolDispatch(build_registry(mock_client))


@pytest.fixture
async def client(dispatch):
    """FastAPI test client wired to the mocked dispatcher."""
    app = create_app()
    app.state.dispatch = dispatch
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

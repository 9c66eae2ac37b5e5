"""Meeting BaaS Tool Server: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BaasToolError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One BaasClient per process: created on startup, closed on shutdown, shared
      by every handler through the registry

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory: tests build an app and put their own dispatcher on
      app.state; the lifespan leaves a pre-set dispatcher alone
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from baas_mcp.api.error_handlers import register_error_handlers
from baas_mcp.api.routes import health, mcp, tools
from baas_mcp.config import get_settings
from baas_mcp.infrastructure.baas_client import BaasClient
from baas_mcp.infrastructure.observability import setup_logging
from baas_mcp.services.tool_dispatch import ToolDispatch
from baas_mcp.services.tools_registry import build_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    client = None
    if getattr(app.state, "dispatch", None) is None:
        if not settings.baas_api_key:
            logger.warning("BAAS_API_KEY is not set; backend calls will be rejected")
        client = BaasClient(
            api_key=settings.baas_api_key,
            base_url=settings.baas_api_url,
            timeout_seconds=settings.baas_timeout_seconds,
        )
        app.state.dispatch = ToolDispatch(build_registry(client))

    logger.info(
        f"Meeting BaaS tool server started with {len(app.state.dispatch.registry)} tools",
    )
    yield
    logger.info("Meeting BaaS tool server shutting down")
    if client is not None:
        await client.aclose()
        app.state.dispatch = None


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Meeting BaaS Tool Server",
        version=settings.server_version,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(tools.router)
    app.include_router(mcp.router)

    register_error_handlers(app)
    return app


app = create_app()

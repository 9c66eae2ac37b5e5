"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - Never calls Meeting BaaS: a backend outage must not restart this process
"""

from fastapi import APIRouter, Depends, status

from baas_mcp.api.dependencies import get_dispatch
from baas_mcp.config import get_settings
from baas_mcp.services.tool_dispatch import ToolDispatch

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(dispatch: ToolDispatch = Depends(get_dispatch)):
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.server_name,
        "version": settings.server_version,
        "tools": len(dispatch.registry),
    }

"""
Health check endpoints.

Provides health status and version information for the API.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from pet_registry import __version__
from pet_registry.api.schemas.responses import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
@router.get("/", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report API status and whether snapshot persistence is enabled."""
    settings = request.app.state.settings
    components = {
        "registry": "healthy: in memory",
        "persistence": (
            f"healthy: {settings.state_file}" if settings.state_file else "disabled"
        ),
        "audit": f"healthy: {settings.audit_dir}" if settings.audit_dir else "disabled",
    }
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        components=components,
    )

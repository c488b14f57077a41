"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Reports the application version and how many error codes are loaded.
"""

from fastapi import APIRouter, Depends

from app.core.config import Settings
from app.domain.error_codes.registry import ErrorRegistry
from app.interfaces.error_codes.dependencies import get_error_registry, get_settings
from app.interfaces.error_codes.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(
    settings: Settings = Depends(get_settings),
    registry: ErrorRegistry = Depends(get_error_registry),
) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok", version=settings.version, error_codes=len(registry)
    )

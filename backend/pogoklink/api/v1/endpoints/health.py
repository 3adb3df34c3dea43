"""
Health check endpoint.
Reports database reachability, uptime and the stored schedule count.
"""

from fastapi import APIRouter

from pogoklink.schemas.health import HealthResponse
from pogoklink.deps.di_container import get_container

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def get_health() -> HealthResponse:
    """Health check; status is "degraded" when any check fails."""
    controller = get_container().health_controller()
    return await controller.get_health()

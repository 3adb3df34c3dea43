"""
API v1 router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from pogoklink.api.v1.endpoints import (
    health,
    calendars,
    schedules,
    departments,
    academic_settings,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(calendars.router, prefix="/calendar", tags=["calendar"])
api_router.include_router(schedules.router, prefix="/schedules", tags=["schedules"])
api_router.include_router(departments.router, prefix="/departments", tags=["departments"])
api_router.include_router(academic_settings.router, prefix="/settings", tags=["settings"])

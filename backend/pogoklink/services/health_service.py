"""
Health service.
Provides health check functionality.
"""

import time
from sqlalchemy.exc import SQLAlchemyError

from pogoklink.services.base_service import BaseService
from pogoklink.schemas.health import HealthResponse


class HealthService(BaseService):
    """Service for health check operations."""

    def __init__(self):
        self.start_time = time.time()

    async def get_health(self) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration format

        checks = {}
        details = {}

        from pogoklink.db import session as db_session
        from pogoklink.db.repositories.health_repository import HealthRepository

        if db_session.async_session_maker is None:
            checks["database"] = "error: not initialized"
        else:
            try:
                async with db_session.async_session_maker() as session:
                    repo = HealthRepository(session=session)
                    db_status = await repo.check_database()
                    checks["database"] = "ok" if db_status else "error"
                    if db_status:
                        schedule_count = await repo.count_schedules()
                        checks["schedules"] = "ok" if schedule_count is not None else "error: table unreadable"
                        details["schedule_count"] = schedule_count
            except (SQLAlchemyError, OSError) as e:
                checks["database"] = f"error: {str(e)}"

        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"

        return HealthResponse(
            status=status,
            uptime=uptime_str,
            checks=checks,
            details=details,
        )

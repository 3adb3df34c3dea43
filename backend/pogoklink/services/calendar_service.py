"""
Calendar service: builds the projected calendar from backend data.
"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from pogoklink.core.config import settings as app_settings
from pogoklink.core.logging import get_logger
from pogoklink.db.backend import CalendarBackend
from pogoklink.services.base_service import BaseService
from pogoklink.schemas.calendar import CalendarResponse
from pogoklink.utils.calendar_projection import (
    current_academic_year,
    filter_by_departments,
    project_calendar,
)

logger = get_logger(__name__)


class CalendarService(BaseService):
    """Service for calendar projection."""

    def __init__(self, backend: CalendarBackend):
        self.backend = backend

    async def get_calendar(
        self,
        year: Optional[int] = None,
        today: Optional[date] = None,
        dept_ids: Optional[List[UUID]] = None,
    ) -> CalendarResponse:
        """
        Project holidays and schedules for an academic year.

        Args:
            year: Academic year; the latest configured year when omitted
            today: Reference date when no year is configured at all
            dept_ids: Only show schedules of these departments; holidays stay

        Returns:
            CalendarResponse with entries and the department legend
        """
        academic_settings = await self.backend.fetch_settings(year)
        departments = await self.backend.fetch_departments()
        schedules = filter_by_departments(await self.backend.fetch_schedules(), dept_ids)

        if academic_settings.academic_year is None:
            academic_settings = academic_settings.model_copy(
                update={"academic_year": current_academic_year(today or date.today())}
            )

        entries = project_calendar(
            schedules,
            academic_settings,
            departments,
            default_color=app_settings.DEFAULT_EVENT_COLOR,
        )

        logger.info(
            "Calendar projected",
            extra={
                "academic_year": academic_settings.academic_year,
                "entries": len(entries),
                "departments": len(departments),
            },
        )

        return CalendarResponse(
            academic_year=academic_settings.academic_year,
            entries=entries,
            departments=departments,
            total=len(entries),
        )

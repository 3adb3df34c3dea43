"""
Calendar controller.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from pogoklink.controllers.base_controller import BaseController
from pogoklink.db.backend import SqlCalendarBackend
from pogoklink.services.calendar_service import CalendarService
from pogoklink.schemas.calendar import CalendarResponse


class CalendarController(BaseController):
    """Controller for calendar operations."""

    def __init__(self, session: AsyncSession):
        self.calendar_service = CalendarService(SqlCalendarBackend(session))

    async def get_calendar(
        self,
        year: Optional[int] = None,
        dept_ids: Optional[List[UUID]] = None,
    ) -> CalendarResponse:
        """Get the projected calendar for an academic year."""
        return await self.calendar_service.get_calendar(year=year, dept_ids=dept_ids)

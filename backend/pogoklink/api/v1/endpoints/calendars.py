"""
Calendar API endpoints.
"""

from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from pogoklink.db.session import get_db
from pogoklink.controllers.calendar_controller import CalendarController
from pogoklink.schemas.calendar import CalendarResponse

router = APIRouter()


@router.get("", response_model=CalendarResponse)
async def get_calendar(
    year: int = Query(None, ge=2000, le=2100),
    dept_ids: Optional[List[UUID]] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> CalendarResponse:
    """
    Holidays and schedules projected as calendar entries.

    Repeat `dept_ids` to show only those departments' schedules; holidays
    are always included.
    """
    controller = CalendarController(db)
    return await controller.get_calendar(year=year, dept_ids=dept_ids)

"""
Calendar projection schemas: the render model consumed by the calendar view.
"""

from pydantic import BaseModel
from typing import Optional, List, Literal
from datetime import date
from uuid import UUID

from pogoklink.models.schedule import ScheduleVisibility
from pogoklink.schemas.department import DepartmentResponse


class CalendarEntryProps(BaseModel):
    """Metadata carried by a schedule entry for filtering and printing."""
    dept_id: Optional[UUID] = None
    description: Optional[str] = None
    visibility: ScheduleVisibility
    is_printable: bool


class CalendarEntry(BaseModel):
    """
    One calendar entry.

    Holidays are background entries (`display="background"`) with no id and
    no extended props; schedules are foreground entries.
    """
    id: Optional[str] = None
    title: str
    start: date
    end: Optional[date] = None
    all_day: bool = True
    display: Literal["auto", "background"] = "auto"
    class_name: Optional[str] = None
    background_color: Optional[str] = None
    border_color: Optional[str] = None
    extended_props: Optional[CalendarEntryProps] = None

    @property
    def is_background(self) -> bool:
        return self.display == "background"


class CalendarResponse(BaseModel):
    """Projected calendar for one academic year plus the department legend."""
    academic_year: int
    entries: List[CalendarEntry]
    departments: List[DepartmentResponse]
    total: int

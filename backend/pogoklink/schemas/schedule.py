"""
Schedule Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Any, Optional, List
from datetime import date
from uuid import UUID

from pogoklink.models.schedule import ScheduleVisibility, RecurrenceFrequency


class ScheduleBase(BaseModel):
    """Base schedule schema with common fields."""
    title: str = Field(..., min_length=1, max_length=255)
    start_date: date
    end_date: date
    dept_id: Optional[UUID] = None
    visibility: ScheduleVisibility = ScheduleVisibility.INTERNAL
    description: Optional[str] = Field("", max_length=2000)
    is_printable: bool = True
    author_id: Optional[UUID] = None

    @model_validator(mode='after')
    def validate_dates(self):
        """Validate that end_date is not before start_date."""
        if self.end_date < self.start_date:
            raise ValueError('End date must not be before start date')
        return self


class ScheduleInstance(ScheduleBase):
    """A concrete, not yet persisted occurrence of a schedule."""
    pass


class RecurrencePolicy(BaseModel):
    """How a schedule repeats; `until` is inclusive."""
    frequency: RecurrenceFrequency
    until: date


class ScheduleCreate(ScheduleBase):
    """Schema for creating a schedule, optionally repeating."""
    recurrence: Optional[RecurrencePolicy] = None


class ScheduleUpdate(BaseModel):
    """Schema for updating a schedule (all fields optional)."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    dept_id: Optional[UUID] = None
    visibility: Optional[ScheduleVisibility] = None
    description: Optional[str] = Field(None, max_length=2000)
    is_printable: Optional[bool] = None

    @model_validator(mode='after')
    def validate_dates(self):
        """Reject explicit nulls for stored non-null fields; check date order when both dates are given."""
        for field in ('title', 'start_date', 'end_date', 'visibility', 'is_printable'):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f'{field} cannot be null')
        if self.end_date is not None and self.start_date is not None:
            if self.end_date < self.start_date:
                raise ValueError('End date must not be before start date')
        return self


class ScheduleRecord(ScheduleBase):
    """A schedule as stored by the data backend; id is None until persisted."""
    id: Optional[UUID] = None

    class Config:
        from_attributes = True


class ScheduleResponse(ScheduleBase):
    """Schema for schedule response."""
    id: UUID

    class Config:
        from_attributes = True


class ScheduleListResponse(BaseModel):
    """Schema for schedule list response."""
    items: List[ScheduleResponse]
    total: int


class ScheduleImportRequest(BaseModel):
    """
    Tabulated rows from the schedule import sheet, header row excluded.

    Column order: title, start date, end date, description,
    department name, visibility label.
    """
    rows: List[List[Any]] = Field(..., min_length=1)
    author_id: Optional[UUID] = None


class ScheduleImportResponse(BaseModel):
    """Result of a bulk schedule import."""
    inserted: int
    skipped: int
    items: List[ScheduleResponse]

"""
Academic settings schemas: holiday definitions for an academic year.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Dict, Optional
from datetime import date
from uuid import UUID


class AcademicSettings(BaseModel):
    """
    Holiday settings as read from the data backend.

    Keys are not validated here; malformed entries stored by older clients
    are skipped when the calendar is projected.
    """
    academic_year: Optional[int] = None
    fixed_holidays: Dict[str, str] = {}
    variable_holidays: Dict[str, str] = {}

    class Config:
        from_attributes = True


class AcademicSettingsUpdate(BaseModel):
    """Schema for replacing the holidays of one academic year."""
    fixed_holidays: Dict[str, str] = {}
    variable_holidays: Dict[str, str] = {}

    @field_validator('fixed_holidays')
    @classmethod
    def validate_fixed_keys(cls, value: Dict[str, str]) -> Dict[str, str]:
        """Fixed holidays are keyed by MMDD, e.g. "0301"."""
        for key in value:
            if len(key) != 4 or not key.isdigit():
                raise ValueError(f"Fixed holiday key must be MMDD: {key!r}")
            # 2000 is a leap year, so 0229 is accepted
            try:
                date(2000, int(key[:2]), int(key[2:]))
            except ValueError:
                raise ValueError(f"Fixed holiday key is not a calendar day: {key!r}")
        return value

    @field_validator('variable_holidays')
    @classmethod
    def validate_variable_keys(cls, value: Dict[str, str]) -> Dict[str, str]:
        """Variable holidays are keyed by YYYY-MM-DD."""
        for key in value:
            try:
                parsed = date.fromisoformat(key)
            except ValueError:
                raise ValueError(f"Variable holiday key must be YYYY-MM-DD: {key!r}")
            if parsed.isoformat() != key:
                raise ValueError(f"Variable holiday key must be YYYY-MM-DD: {key!r}")
        return value


class AcademicSettingsResponse(AcademicSettings):
    """Schema for academic settings response."""
    id: Optional[UUID] = None
    academic_year: int = Field(..., ge=2000, le=2100)

"""
Department Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from uuid import UUID

HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class DepartmentBase(BaseModel):
    """Base department schema with common fields."""
    dept_name: str = Field(..., min_length=1, max_length=50)
    dept_color: str = Field("#3788d8", pattern=HEX_COLOR_PATTERN)
    is_active: bool = True
    sort_order: int = Field(0, ge=0)


class DepartmentCreate(DepartmentBase):
    """Schema for creating a department."""
    pass


class DepartmentUpdate(BaseModel):
    """Schema for updating a department (all fields optional)."""
    dept_name: Optional[str] = Field(None, min_length=1, max_length=50)
    dept_color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    is_active: Optional[bool] = None
    sort_order: Optional[int] = Field(None, ge=0)


class DepartmentBulkUpdateItem(BaseModel):
    """Name and colour change for one department in a bulk save."""
    id: UUID
    dept_name: str = Field(..., min_length=1, max_length=50)
    dept_color: str = Field(..., pattern=HEX_COLOR_PATTERN)


class DepartmentBulkUpdate(BaseModel):
    """Schema for saving many departments at once."""
    items: List[DepartmentBulkUpdateItem] = Field(..., min_length=1)


class DepartmentResponse(DepartmentBase):
    """Schema for department response."""
    id: UUID

    class Config:
        from_attributes = True


class DepartmentListResponse(BaseModel):
    """Schema for department list response."""
    items: List[DepartmentResponse]
    total: int

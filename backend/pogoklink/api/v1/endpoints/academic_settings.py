"""
Academic settings API endpoints.
"""

from fastapi import APIRouter, Depends, Path, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from pogoklink.db.session import get_db
from pogoklink.controllers.academic_settings_controller import AcademicSettingsController
from pogoklink.schemas.academic_settings import AcademicSettingsUpdate, AcademicSettingsResponse

router = APIRouter()


@router.get("", response_model=AcademicSettingsResponse)
async def get_settings(
    year: int = Query(None, ge=2000, le=2100),
    db: AsyncSession = Depends(get_db),
) -> AcademicSettingsResponse:
    """Get holiday settings for a year, or the latest configured year."""
    controller = AcademicSettingsController(db)
    academic_settings = await controller.get_settings(year)
    if not academic_settings:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Academic settings not found",
        )
    return academic_settings


@router.put("/{year}", response_model=AcademicSettingsResponse)
async def upsert_settings(
    settings_data: AcademicSettingsUpdate,
    year: int = Path(..., ge=2000, le=2100),
    db: AsyncSession = Depends(get_db),
) -> AcademicSettingsResponse:
    """Create or replace the holiday settings of an academic year."""
    controller = AcademicSettingsController(db)
    return await controller.upsert_settings(year, settings_data)

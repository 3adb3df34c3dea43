"""
Academic settings service with business logic.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from pogoklink.core.logging import get_logger
from pogoklink.services.base_service import BaseService
from pogoklink.db.repositories.academic_settings_repository import AcademicSettingsRepository
from pogoklink.schemas.academic_settings import AcademicSettingsUpdate, AcademicSettingsResponse

logger = get_logger(__name__)


class AcademicSettingsService(BaseService):
    """Service for academic settings operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.settings_repo = AcademicSettingsRepository(session)

    async def get_settings(self, academic_year: Optional[int] = None) -> Optional[AcademicSettingsResponse]:
        """Get settings for a year, or the latest configured year."""
        if academic_year is None:
            row = await self.settings_repo.get_latest()
        else:
            row = await self.settings_repo.get_by_year(academic_year)
        if not row:
            return None
        return AcademicSettingsResponse.model_validate(row)

    async def upsert_settings(
        self,
        academic_year: int,
        settings_data: AcademicSettingsUpdate,
    ) -> AcademicSettingsResponse:
        """Create or replace the holiday settings of an academic year."""
        values = settings_data.model_dump()
        row = await self.settings_repo.get_by_year(academic_year)
        if row is None:
            row = await self.settings_repo.create(academic_year=academic_year, **values)
        else:
            row = await self.settings_repo.update(row.id, **values)
        await self.session.commit()
        await self.session.refresh(row)

        logger.info(
            "UPDATE_SETTINGS",
            extra={
                "table": "settings",
                "academic_year": academic_year,
                "fixed": len(values["fixed_holidays"]),
                "variable": len(values["variable_holidays"]),
            },
        )
        return AcademicSettingsResponse.model_validate(row)

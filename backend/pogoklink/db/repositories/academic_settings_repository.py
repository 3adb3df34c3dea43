"""
Academic settings repository for database operations.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from pogoklink.db.repositories.base_repository import BaseRepository
from pogoklink.models.academic_settings import AcademicSettings


class AcademicSettingsRepository(BaseRepository[AcademicSettings]):
    """Repository for academic settings operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(AcademicSettings, session)

    async def get_by_year(self, academic_year: int) -> Optional[AcademicSettings]:
        """Get the settings row for an academic year."""
        result = await self.session.execute(
            select(AcademicSettings).where(AcademicSettings.academic_year == academic_year)
        )
        return result.scalar_one_or_none()

    async def get_latest(self) -> Optional[AcademicSettings]:
        """Get the settings row with the highest academic year."""
        result = await self.session.execute(
            select(AcademicSettings)
            .order_by(AcademicSettings.academic_year.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

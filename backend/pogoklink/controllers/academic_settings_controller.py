"""
Academic settings controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from pogoklink.controllers.base_controller import BaseController
from pogoklink.services.academic_settings_service import AcademicSettingsService
from pogoklink.schemas.academic_settings import AcademicSettingsUpdate, AcademicSettingsResponse


class AcademicSettingsController(BaseController):
    """Controller for academic settings operations."""

    def __init__(self, session: AsyncSession):
        self.settings_service = AcademicSettingsService(session)

    async def get_settings(self, academic_year: Optional[int] = None) -> Optional[AcademicSettingsResponse]:
        """Get settings for a year, or the latest one."""
        return await self.settings_service.get_settings(academic_year)

    async def upsert_settings(
        self,
        academic_year: int,
        settings_data: AcademicSettingsUpdate,
    ) -> AcademicSettingsResponse:
        """Create or replace a year's holiday settings."""
        return await self.settings_service.upsert_settings(academic_year, settings_data)

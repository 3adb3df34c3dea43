"""
Schedule controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import io

from pogoklink.controllers.base_controller import BaseController
from pogoklink.db.backend import SqlCalendarBackend
from pogoklink.services.schedule_service import ScheduleService
from pogoklink.services.schedule_excel_service import ScheduleExcelService
from pogoklink.schemas.schedule import (
    ScheduleCreate,
    ScheduleUpdate,
    ScheduleResponse,
    ScheduleListResponse,
    ScheduleImportRequest,
    ScheduleImportResponse,
)


class ScheduleController(BaseController):
    """Controller for schedule operations."""

    def __init__(self, session: AsyncSession):
        self.schedule_service = ScheduleService(SqlCalendarBackend(session))
        self.excel_service = ScheduleExcelService()

    async def create_schedule(self, schedule_data: ScheduleCreate) -> ScheduleListResponse:
        """Create a schedule or a recurring series."""
        return await self.schedule_service.create_schedule(schedule_data)

    async def get_schedule(self, schedule_id: UUID) -> Optional[ScheduleResponse]:
        """Get schedule by ID."""
        return await self.schedule_service.get_schedule(schedule_id)

    async def list_schedules(self) -> ScheduleListResponse:
        """List all schedules."""
        return await self.schedule_service.list_schedules()

    async def search_schedules(self, query: str) -> ScheduleListResponse:
        """Search schedules by title and description."""
        return await self.schedule_service.search(query)

    async def update_schedule(
        self,
        schedule_id: UUID,
        schedule_data: ScheduleUpdate,
    ) -> Optional[ScheduleResponse]:
        """Update a schedule."""
        return await self.schedule_service.update_schedule(schedule_id, schedule_data)

    async def delete_schedule(self, schedule_id: UUID) -> bool:
        """Delete a schedule."""
        return await self.schedule_service.delete_schedule(schedule_id)

    async def import_schedules(self, import_data: ScheduleImportRequest) -> ScheduleImportResponse:
        """Bulk import schedules from tabulated rows."""
        return await self.schedule_service.import_rows(import_data)

    def build_import_template(self) -> io.BytesIO:
        """Build the import workbook template."""
        return self.excel_service.build_import_template()

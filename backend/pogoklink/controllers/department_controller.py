"""
Department controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from pogoklink.controllers.base_controller import BaseController
from pogoklink.services.department_service import DepartmentService
from pogoklink.schemas.department import (
    DepartmentCreate,
    DepartmentUpdate,
    DepartmentBulkUpdate,
    DepartmentResponse,
    DepartmentListResponse,
)


class DepartmentController(BaseController):
    """Controller for department operations."""

    def __init__(self, session: AsyncSession):
        self.department_service = DepartmentService(session)

    async def create_department(self, department_data: DepartmentCreate) -> DepartmentResponse:
        """Create a new department."""
        return await self.department_service.create_department(department_data)

    async def get_department(self, department_id: UUID) -> Optional[DepartmentResponse]:
        """Get department by ID."""
        return await self.department_service.get_department(department_id)

    async def list_departments(self, include_inactive: bool = False) -> DepartmentListResponse:
        """List departments in display order."""
        departments = await self.department_service.list_departments(include_inactive=include_inactive)
        return DepartmentListResponse(items=departments, total=len(departments))

    async def update_department(
        self,
        department_id: UUID,
        department_data: DepartmentUpdate,
    ) -> Optional[DepartmentResponse]:
        """Update a department."""
        return await self.department_service.update_department(department_id, department_data)

    async def bulk_update_departments(self, bulk_data: DepartmentBulkUpdate) -> DepartmentListResponse:
        """Save several departments at once."""
        departments = await self.department_service.bulk_update_departments(bulk_data)
        return DepartmentListResponse(items=departments, total=len(departments))

    async def delete_department(self, department_id: UUID) -> bool:
        """Delete a department."""
        return await self.department_service.delete_department(department_id)

"""
Department service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from pogoklink.core.logging import get_logger
from pogoklink.services.base_service import BaseService
from pogoklink.db.repositories.department_repository import DepartmentRepository
from pogoklink.schemas.department import (
    DepartmentCreate,
    DepartmentUpdate,
    DepartmentBulkUpdate,
    DepartmentResponse,
)

logger = get_logger(__name__)


class DepartmentService(BaseService):
    """Service for department operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.department_repo = DepartmentRepository(session)

    async def create_department(self, department_data: DepartmentCreate) -> DepartmentResponse:
        """Create a new department."""
        department = await self.department_repo.create(**department_data.model_dump())
        await self.session.commit()
        await self.session.refresh(department)
        logger.info("INSERT", extra={"table": "departments", "target_id": str(department.id)})
        return DepartmentResponse.model_validate(department)

    async def get_department(self, department_id: UUID) -> Optional[DepartmentResponse]:
        """Get department by ID."""
        department = await self.department_repo.get(department_id)
        if not department:
            return None
        return DepartmentResponse.model_validate(department)

    async def list_departments(self, include_inactive: bool = False) -> List[DepartmentResponse]:
        """List departments in display order."""
        departments = await self.department_repo.list_ordered(include_inactive=include_inactive)
        return [DepartmentResponse.model_validate(dept) for dept in departments]

    async def update_department(
        self,
        department_id: UUID,
        department_data: DepartmentUpdate,
    ) -> Optional[DepartmentResponse]:
        """Update a department."""
        department = await self.department_repo.get(department_id)
        if not department:
            return None

        update_dict = department_data.model_dump(exclude_unset=True)
        updated = await self.department_repo.update(department_id, **update_dict)
        await self.session.commit()
        await self.session.refresh(updated)
        return DepartmentResponse.model_validate(updated)

    async def bulk_update_departments(self, bulk_data: DepartmentBulkUpdate) -> List[DepartmentResponse]:
        """
        Save names and colours of several departments together.

        Raises:
            ValueError: if any department does not exist; nothing is saved
        """
        updated = []
        for item in bulk_data.items:
            department = await self.department_repo.get(item.id)
            if not department:
                await self.session.rollback()
                raise ValueError(f"Department not found: {item.id}")
            department = await self.department_repo.update(
                item.id,
                dept_name=item.dept_name,
                dept_color=item.dept_color,
            )
            updated.append(department)

        await self.session.commit()
        logger.info("UPDATE_DEPTS", extra={"table": "departments", "count": len(updated)})
        return [DepartmentResponse.model_validate(dept) for dept in updated]

    async def delete_department(self, department_id: UUID) -> bool:
        """Delete a department; its schedules keep rendering with the default colour."""
        deleted = await self.department_repo.delete(department_id)
        await self.session.commit()
        return deleted

"""
Department repository for database operations.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from pogoklink.db.repositories.base_repository import BaseRepository
from pogoklink.models.department import Department


class DepartmentRepository(BaseRepository[Department]):
    """Repository for department operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Department, session)

    async def list_ordered(self, include_inactive: bool = False) -> List[Department]:
        """List departments by sort order, active ones only unless asked."""
        query = select(Department)
        if not include_inactive:
            query = query.where(Department.is_active.is_(True))
        query = query.order_by(Department.sort_order, Department.dept_name)
        result = await self.session.execute(query)
        return list(result.scalars().all())

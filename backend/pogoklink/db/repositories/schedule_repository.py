"""
Schedule repository for database operations.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from pogoklink.db.repositories.base_repository import BaseRepository
from pogoklink.models.schedule import Schedule


class ScheduleRepository(BaseRepository[Schedule]):
    """Repository for schedule operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Schedule, session)

    async def list_all(self) -> List[Schedule]:
        """List every schedule in insertion order."""
        query = select(Schedule).order_by(Schedule.created_at, Schedule.start_date)
        result = await self.session.execute(query)
        return list(result.scalars().all())

"""
Health repository.
Checks that the database and the calendar tables are reachable.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import func, select, text

from pogoklink.models.schedule import Schedule


class HealthRepository:
    """Repository for health check operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def check_database(self) -> bool:
        """
        Check database connectivity.

        Returns:
            True if database is accessible, False otherwise
        """
        try:
            result = await self.session.execute(text("SELECT 1"))
            return result.scalar() == 1
        except SQLAlchemyError:
            return False

    async def count_schedules(self) -> Optional[int]:
        """Number of stored schedules, or None when the table is unreadable."""
        try:
            result = await self.session.execute(select(func.count()).select_from(Schedule))
            return result.scalar_one()
        except SQLAlchemyError:
            return None

"""
Data backend used by the calendar and schedule services.

Services depend on the ``CalendarBackend`` protocol rather than on sessions,
so they can run against the SQL implementation below or an in-memory fake.
Records crossing this boundary are validated pydantic schemas.
"""

from typing import List, Optional, Protocol, Sequence
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from pogoklink.core.exceptions import PersistenceError
from pogoklink.core.logging import get_logger
from pogoklink.db.repositories.academic_settings_repository import AcademicSettingsRepository
from pogoklink.db.repositories.department_repository import DepartmentRepository
from pogoklink.db.repositories.schedule_repository import ScheduleRepository
from pogoklink.schemas.academic_settings import AcademicSettings
from pogoklink.schemas.department import DepartmentResponse
from pogoklink.schemas.schedule import ScheduleBase, ScheduleRecord, ScheduleResponse

logger = get_logger(__name__)

_WRITABLE_FIELDS = set(ScheduleBase.model_fields)


class CalendarBackend(Protocol):
    """Operations the calendar core needs from persistence."""

    async def fetch_settings(self, year: Optional[int] = None) -> AcademicSettings:
        """Settings for ``year``, or the latest year when omitted."""
        ...

    async def fetch_departments(self) -> List[DepartmentResponse]:
        """Active departments ordered by sort order."""
        ...

    async def fetch_schedules(self) -> List[ScheduleResponse]:
        """All stored schedules."""
        ...

    async def get_schedule(self, schedule_id: UUID) -> Optional[ScheduleResponse]:
        """One stored schedule, or None."""
        ...

    async def persist(self, records: Sequence[ScheduleRecord]) -> List[ScheduleResponse]:
        """Insert records without an id, update records with one."""
        ...

    async def delete_schedule(self, schedule_id: UUID) -> bool:
        """Delete a schedule; False when it did not exist."""
        ...


class SqlCalendarBackend:
    """CalendarBackend over async SQLAlchemy repositories."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.settings_repo = AcademicSettingsRepository(session)
        self.department_repo = DepartmentRepository(session)
        self.schedule_repo = ScheduleRepository(session)

    async def fetch_settings(self, year: Optional[int] = None) -> AcademicSettings:
        if year is None:
            row = await self.settings_repo.get_latest()
        else:
            row = await self.settings_repo.get_by_year(year)
        if row is None:
            return AcademicSettings(academic_year=year)
        return AcademicSettings.model_validate(row)

    async def fetch_departments(self) -> List[DepartmentResponse]:
        departments = await self.department_repo.list_ordered()
        return [DepartmentResponse.model_validate(dept) for dept in departments]

    async def fetch_schedules(self) -> List[ScheduleResponse]:
        schedules = await self.schedule_repo.list_all()
        return [ScheduleResponse.model_validate(schedule) for schedule in schedules]

    async def get_schedule(self, schedule_id: UUID) -> Optional[ScheduleResponse]:
        schedule = await self.schedule_repo.get(schedule_id)
        if not schedule:
            return None
        return ScheduleResponse.model_validate(schedule)

    async def persist(self, records: Sequence[ScheduleRecord]) -> List[ScheduleResponse]:
        inserts = [record for record in records if record.id is None]
        updates = [record for record in records if record.id is not None]

        try:
            created = await self.schedule_repo.create_many(
                [record.model_dump(include=_WRITABLE_FIELDS) for record in inserts]
            )
            updated = []
            for record in updates:
                row = await self.schedule_repo.update(
                    record.id, **record.model_dump(include=_WRITABLE_FIELDS)
                )
                if row is None:
                    raise PersistenceError(
                        "Schedule not found", details={"id": str(record.id)}
                    )
                updated.append(row)
            await self.session.commit()
        except PersistenceError:
            await self.session.rollback()
            raise
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                "Failed to persist schedules",
                extra={"inserts": len(inserts), "updates": len(updates), "error": str(e)},
            )
            raise PersistenceError("Failed to save schedules") from e

        return [ScheduleResponse.model_validate(row) for row in created + updated]

    async def delete_schedule(self, schedule_id: UUID) -> bool:
        deleted = await self.schedule_repo.delete(schedule_id)
        await self.session.commit()
        return deleted

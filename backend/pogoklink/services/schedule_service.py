"""
Schedule service with business logic.
"""

from typing import List, Optional
from uuid import UUID

from pogoklink.core.logging import get_logger
from pogoklink.db.backend import CalendarBackend
from pogoklink.services.base_service import BaseService
from pogoklink.schemas.schedule import (
    ScheduleBase,
    ScheduleCreate,
    ScheduleUpdate,
    ScheduleRecord,
    ScheduleResponse,
    ScheduleListResponse,
    ScheduleImportRequest,
    ScheduleImportResponse,
)
from pogoklink.utils.recurrence import expand_recurrence
from pogoklink.utils.schedule_import import map_import_rows
from pogoklink.utils.schedule_search import search_schedules

logger = get_logger(__name__)

_TEMPLATE_FIELDS = set(ScheduleBase.model_fields)


def _to_record(schedule: ScheduleBase, schedule_id: Optional[UUID] = None) -> ScheduleRecord:
    return ScheduleRecord(id=schedule_id, **schedule.model_dump(include=_TEMPLATE_FIELDS))


class ScheduleService(BaseService):
    """Service for schedule operations."""

    def __init__(self, backend: CalendarBackend):
        self.backend = backend

    async def create_schedule(self, schedule_data: ScheduleCreate) -> ScheduleListResponse:
        """
        Create a schedule, or every occurrence of a recurring one.

        Raises:
            InvalidRecurrenceRange: if the recurrence ends on or before the start
        """
        if schedule_data.recurrence is not None:
            occurrences = expand_recurrence(schedule_data, schedule_data.recurrence)
        else:
            occurrences = [schedule_data]

        created = await self.backend.persist([_to_record(item) for item in occurrences])

        if len(created) > 1:
            logger.info(
                "RECUR_INSERT",
                extra={
                    "table": "schedules",
                    "count": len(created),
                    "title": schedule_data.title,
                    "frequency": schedule_data.recurrence.frequency.value,
                },
            )
        else:
            logger.info(
                "INSERT",
                extra={
                    "table": "schedules",
                    "target_id": str(created[0].id),
                    "title": schedule_data.title,
                    "dept_id": str(schedule_data.dept_id) if schedule_data.dept_id else None,
                },
            )

        return ScheduleListResponse(items=created, total=len(created))

    async def get_schedule(self, schedule_id: UUID) -> Optional[ScheduleResponse]:
        """Get schedule by ID."""
        return await self.backend.get_schedule(schedule_id)

    async def list_schedules(self) -> ScheduleListResponse:
        """List all schedules."""
        schedules = await self.backend.fetch_schedules()
        return ScheduleListResponse(items=schedules, total=len(schedules))

    async def search(self, query: str) -> ScheduleListResponse:
        """Search schedules by title and description."""
        schedules = await self.backend.fetch_schedules()
        matches = search_schedules(schedules, query)
        return ScheduleListResponse(items=matches, total=len(matches))

    async def update_schedule(
        self,
        schedule_id: UUID,
        schedule_data: ScheduleUpdate,
    ) -> Optional[ScheduleResponse]:
        """
        Update one schedule; edits never re-expand a recurrence.

        Raises:
            ValueError: if the merged dates are out of order
        """
        existing = await self.backend.get_schedule(schedule_id)
        if not existing:
            return None

        merged = existing.model_copy(update=schedule_data.model_dump(exclude_unset=True))
        if merged.end_date < merged.start_date:
            raise ValueError("End date must not be before start date")

        record = ScheduleRecord(**merged.model_dump(include=_TEMPLATE_FIELDS | {"id"}))
        updated = await self.backend.persist([record])

        logger.info(
            "UPDATE",
            extra={"table": "schedules", "target_id": str(schedule_id), "title": record.title},
        )
        return updated[0]

    async def delete_schedule(self, schedule_id: UUID) -> bool:
        """Delete a schedule."""
        deleted = await self.backend.delete_schedule(schedule_id)
        if deleted:
            logger.info("DELETE", extra={"table": "schedules", "target_id": str(schedule_id)})
        return deleted

    async def import_rows(self, import_data: ScheduleImportRequest) -> ScheduleImportResponse:
        """Insert schedules from tabulated import rows."""
        departments = await self.backend.fetch_departments()
        records, skipped = map_import_rows(import_data.rows, departments, import_data.author_id)

        created: List[ScheduleResponse] = []
        if records:
            created = await self.backend.persist([_to_record(record) for record in records])

        logger.info(
            "BULK_INSERT",
            extra={"table": "schedules", "count": len(created), "skipped": skipped},
        )
        return ScheduleImportResponse(inserted=len(created), skipped=skipped, items=created)

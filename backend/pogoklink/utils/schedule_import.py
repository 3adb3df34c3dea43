"""
Mapping of schedule import sheet rows to schedule records.

Rows arrive already tabulated (header removed) in the column order of the
import template:

    title | start date | end date | description | department name | visibility
"""

import logging
from datetime import date, datetime
from typing import Any, List, Optional, Sequence, Tuple
from uuid import UUID

from pydantic import ValidationError

from pogoklink.models.schedule import ScheduleVisibility
from pogoklink.schemas.department import DepartmentResponse
from pogoklink.schemas.schedule import ScheduleBase

logger = logging.getLogger(__name__)

IMPORT_COLUMNS = [
    "일정명",
    "시작일(YYYY-MM-DD)",
    "종료일(YYYY-MM-DD)",
    "내용",
    "부서명(정확히)",
    "공개범위(전체/교직원/부서)",
]

VISIBILITY_LABELS = {
    "전체": ScheduleVisibility.PUBLIC,
    "교직원": ScheduleVisibility.INTERNAL,
    "부서": ScheduleVisibility.DEPT,
    "public": ScheduleVisibility.PUBLIC,
    "internal": ScheduleVisibility.INTERNAL,
    "dept": ScheduleVisibility.DEPT,
}


def parse_visibility(label: Any) -> ScheduleVisibility:
    """Map a sheet label to a visibility; unknown labels mean internal."""
    if isinstance(label, str):
        return VISIBILITY_LABELS.get(label.strip(), ScheduleVisibility.INTERNAL)
    return ScheduleVisibility.INTERNAL


def parse_cell_date(value: Any) -> Optional[date]:
    """Accept date/datetime cells and YYYY-MM-DD text; anything else is None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def _cell(row: Sequence[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def map_import_rows(
    rows: Sequence[Sequence[Any]],
    departments: Sequence[DepartmentResponse],
    author_id: Optional[UUID] = None,
) -> Tuple[List[ScheduleBase], int]:
    """
    Convert import rows into schedule records.

    Rows with fewer than two cells or without a title or start date are
    skipped, as are rows whose dates cannot be read. The department is
    matched by exact name and falls back to the first department. A missing
    end date means a single-day schedule.

    Args:
        rows: Sheet rows without the header
        departments: Active departments in display order
        author_id: User performing the import

    Returns:
        Tuple of (schedule records, number of skipped rows)
    """
    by_name = {dept.dept_name: dept for dept in departments}
    fallback = departments[0] if departments else None

    records: List[ScheduleBase] = []
    skipped = 0

    for row_number, row in enumerate(rows, start=1):
        if len(row) < 2:
            skipped += 1
            continue

        title = _cell(row, 0)
        start_cell = _cell(row, 1)
        if _is_blank(title) or _is_blank(start_cell):
            skipped += 1
            continue

        start = parse_cell_date(start_cell)
        end_cell = _cell(row, 2)
        end = start if _is_blank(end_cell) else parse_cell_date(end_cell)
        if start is None or end is None:
            logger.warning("Import row has unreadable dates", extra={"row": row_number})
            skipped += 1
            continue

        dept_name = _cell(row, 4)
        dept = by_name.get(dept_name.strip(), fallback) if isinstance(dept_name, str) else fallback
        description = _cell(row, 3)

        try:
            record = ScheduleBase(
                title=str(title).strip(),
                start_date=start,
                end_date=end,
                description="" if _is_blank(description) else str(description),
                dept_id=dept.id if dept is not None else None,
                visibility=parse_visibility(_cell(row, 5)),
                is_printable=True,
                author_id=author_id,
            )
        except ValidationError as e:
            logger.warning(
                "Import row rejected",
                extra={"row": row_number, "errors": e.error_count()},
            )
            skipped += 1
            continue

        records.append(record)

    return records, skipped

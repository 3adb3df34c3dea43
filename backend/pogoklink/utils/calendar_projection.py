"""
Calendar projection.
Merges holiday settings, departments and schedules into calendar entries.
"""

import logging
from datetime import date
from typing import Collection, Dict, Iterable, List, Optional, TypeVar
from uuid import UUID

from pogoklink.schemas.academic_settings import AcademicSettings
from pogoklink.schemas.calendar import CalendarEntry, CalendarEntryProps
from pogoklink.schemas.department import DepartmentResponse
from pogoklink.schemas.schedule import ScheduleBase

logger = logging.getLogger(__name__)

ScheduleType = TypeVar("ScheduleType", bound=ScheduleBase)

DEFAULT_EVENT_COLOR = "#3788d8"
HOLIDAY_EVENT_CLASS = "holiday-bg-event"

# The school year starts in March
ACADEMIC_YEAR_START_MONTH = 3


def current_academic_year(today: date) -> int:
    """January and February still belong to the previous academic year."""
    if today.month < ACADEMIC_YEAR_START_MONTH:
        return today.year - 1
    return today.year


def _fixed_holiday_date(year: int, mmdd: str) -> Optional[date]:
    if len(mmdd) != 4 or not mmdd.isdigit():
        return None
    try:
        return date(year, int(mmdd[:2]), int(mmdd[2:]))
    except ValueError:
        return None


def _variable_holiday_date(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def _holiday_entry(name: str, day: date) -> CalendarEntry:
    return CalendarEntry(
        title=name,
        start=day,
        all_day=True,
        display="background",
        class_name=HOLIDAY_EVENT_CLASS,
    )


def filter_by_departments(
    schedules: Iterable[ScheduleType],
    dept_ids: Optional[Collection[UUID]],
) -> List[ScheduleType]:
    """
    Keep schedules whose department is in ``dept_ids``, in source order.

    ``None`` means no filter; schedules without a department are dropped
    once a filter is given.
    """
    if dept_ids is None:
        return list(schedules)
    wanted = set(dept_ids)
    return [schedule for schedule in schedules if schedule.dept_id in wanted]


def project_holidays(settings: AcademicSettings, year: int) -> List[CalendarEntry]:
    """
    Build background entries for fixed and variable holidays.

    Fixed holidays ("MMDD") are placed in ``year``; variable holidays carry
    their own date. Entries that do not form a calendar date are skipped.
    """
    entries: List[CalendarEntry] = []

    for mmdd, name in (settings.fixed_holidays or {}).items():
        day = _fixed_holiday_date(year, mmdd)
        if day is None:
            logger.debug("Skipping malformed fixed holiday", extra={"key": mmdd, "year": year})
            continue
        entries.append(_holiday_entry(name, day))

    for date_str, name in (settings.variable_holidays or {}).items():
        day = _variable_holiday_date(date_str)
        if day is None:
            logger.debug("Skipping malformed variable holiday", extra={"key": date_str})
            continue
        entries.append(_holiday_entry(name, day))

    return entries


def project_calendar(
    schedules: Iterable[ScheduleBase],
    settings: AcademicSettings,
    departments: Iterable[DepartmentResponse],
    today: Optional[date] = None,
    default_color: str = DEFAULT_EVENT_COLOR,
) -> List[CalendarEntry]:
    """
    Project schedules and holidays onto a single ordered entry list.

    Holiday background entries come first, then one foreground entry per
    schedule, each group in source order. Schedules whose department is
    unknown are kept and drawn in ``default_color``.

    Args:
        schedules: Stored schedules or unsaved occurrences
        settings: Holiday settings; a missing academic_year falls back to
            the academic year containing ``today``
        departments: Department reference data
        today: Reference date for the academic year fallback
        default_color: Colour for schedules without a known department

    Returns:
        Calendar entries
    """
    year = settings.academic_year
    if year is None:
        year = current_academic_year(today or date.today())

    entries = project_holidays(settings, year)

    dept_map: Dict = {dept.id: dept for dept in departments}

    for schedule in schedules:
        dept = dept_map.get(schedule.dept_id)
        color = dept.dept_color if dept is not None and dept.dept_color else default_color
        schedule_id = getattr(schedule, "id", None)
        entries.append(
            CalendarEntry(
                id=str(schedule_id) if schedule_id is not None else None,
                title=schedule.title,
                start=schedule.start_date,
                end=schedule.end_date,
                all_day=True,
                background_color=color,
                border_color=color,
                extended_props=CalendarEntryProps(
                    dept_id=schedule.dept_id,
                    description=schedule.description,
                    visibility=schedule.visibility,
                    is_printable=schedule.is_printable,
                ),
            )
        )

    return entries

"""
Schedule search over an in-memory list.
"""

from typing import List, Sequence, TypeVar

from pogoklink.schemas.schedule import ScheduleBase

ScheduleType = TypeVar("ScheduleType", bound=ScheduleBase)

# Shorter queries are not sent by the calendar view
MIN_QUERY_LENGTH = 2


def search_schedules(schedules: Sequence[ScheduleType], query: str) -> List[ScheduleType]:
    """
    Case-insensitive substring search on title and description.

    Args:
        schedules: Schedules to search
        query: Text to look for; surrounding whitespace is ignored

    Returns:
        Matching schedules in their original order
    """
    needle = query.strip().lower()
    if not needle:
        return []

    return [
        schedule
        for schedule in schedules
        if needle in schedule.title.lower()
        or (schedule.description and needle in schedule.description.lower())
    ]

"""
Recurring schedule expansion.

Turns one schedule template and a recurrence policy into the list of dated
occurrences that get inserted as separate schedule rows.

Rules:
- ``policy.until`` must be strictly after the template's start date and is
  inclusive: an occurrence starting on ``until`` is generated.
- Every occurrence keeps the template's span (end_date - start_date).
- At most MAX_OCCURRENCES occurrences are produced; longer policies are
  truncated without error.
- Monthly occurrences are computed from the original start date and clamp to
  the last day of shorter months, so 2025-01-31 repeats as 02-28, 03-31,
  04-30. No month is skipped or produced twice.
"""

import calendar
from datetime import date, timedelta
from typing import List

from pogoklink.core.exceptions import InvalidRecurrenceRange
from pogoklink.models.schedule import RecurrenceFrequency
from pogoklink.schemas.schedule import ScheduleBase, ScheduleInstance, RecurrencePolicy

# One school year of weekly repeats
MAX_OCCURRENCES = 52

_DAY_STEPS = {
    RecurrenceFrequency.WEEKLY: 7,
    RecurrenceFrequency.BIWEEKLY: 14,
}

_TEMPLATE_FIELDS = set(ScheduleBase.model_fields)


def add_months(value: date, months: int) -> date:
    """
    Shift a date by whole calendar months, clamping the day to month end.

    Args:
        value: Anchor date
        months: Number of months to move forward

    Returns:
        Date in the target month
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def occurrence_start(anchor: date, frequency: RecurrenceFrequency, index: int) -> date:
    """Start date of the index-th occurrence (0 is the anchor itself)."""
    if frequency == RecurrenceFrequency.MONTHLY:
        return add_months(anchor, index)
    return anchor + timedelta(days=_DAY_STEPS[frequency] * index)


def _instance_at(template: ScheduleBase, start: date, duration: timedelta) -> ScheduleInstance:
    data = template.model_dump(include=_TEMPLATE_FIELDS)
    data["start_date"] = start
    data["end_date"] = start + duration
    return ScheduleInstance(**data)


def expand_recurrence(template: ScheduleBase, policy: RecurrencePolicy) -> List[ScheduleInstance]:
    """
    Expand a schedule template into its dated occurrences.

    Args:
        template: Schedule fields entered by the user
        policy: Frequency and inclusive end date

    Returns:
        Occurrences in chronological order, never empty

    Raises:
        InvalidRecurrenceRange: if policy.until is not after template.start_date
    """
    if policy.until <= template.start_date:
        raise InvalidRecurrenceRange(template.start_date, policy.until)

    duration = template.end_date - template.start_date
    instances: List[ScheduleInstance] = []

    count = 0
    cursor = template.start_date
    while cursor <= policy.until and count < MAX_OCCURRENCES:
        try:
            instances.append(_instance_at(template, cursor, duration))
            count += 1
            cursor = occurrence_start(template.start_date, policy.frequency, count)
        except (OverflowError, ValueError):
            # ran past date.max
            break

    # Only reached when MAX_OCCURRENCES is zero; the result is never empty
    if not instances:
        instances.append(_instance_at(template, template.start_date, duration))

    return instances

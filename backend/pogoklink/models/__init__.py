"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from pogoklink.models.department import Department
from pogoklink.models.schedule import Schedule, ScheduleVisibility, RecurrenceFrequency
from pogoklink.models.academic_settings import AcademicSettings

__all__ = [
    "Department",
    "Schedule",
    "ScheduleVisibility",
    "RecurrenceFrequency",
    "AcademicSettings",
]

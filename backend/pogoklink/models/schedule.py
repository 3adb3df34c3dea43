"""
Schedule model for dated entries on the shared academic calendar.
"""

from sqlalchemy import Column, String, Boolean, Date, DateTime, ForeignKey, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
import uuid
import enum

from pogoklink.db.base import Base


class ScheduleVisibility(str, enum.Enum):
    """Access scope of a schedule, enforced by the authorization layer."""
    PUBLIC = "public"
    INTERNAL = "internal"
    DEPT = "dept"


class RecurrenceFrequency(str, enum.Enum):
    """Step between generated occurrences of a recurring schedule."""
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class Schedule(Base):
    """A single calendar schedule spanning start_date..end_date (inclusive)."""

    __tablename__ = "schedules"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String(255), nullable=False, index=True)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False)
    dept_id = Column(Uuid, ForeignKey("departments.id", ondelete="SET NULL"), nullable=True, index=True)
    visibility = Column(
        SQLEnum(ScheduleVisibility, values_callable=lambda x: [e.value for e in ScheduleVisibility]),
        nullable=False,
        default=ScheduleVisibility.INTERNAL,
    )
    description = Column(String(2000), nullable=True)
    is_printable = Column(Boolean, nullable=False, default=True)
    author_id = Column(Uuid, nullable=True, index=True)  # user id issued by the auth provider
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    # Relationships
    department = relationship("Department", back_populates="schedules")

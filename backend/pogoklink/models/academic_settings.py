"""
Academic settings model: per-year holiday definitions.
"""

from sqlalchemy import Column, Integer, JSON, Uuid
import uuid

from pogoklink.db.base import Base


class AcademicSettings(Base):
    """Holiday configuration for one academic year."""

    __tablename__ = "settings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    academic_year = Column(Integer, nullable=False, unique=True, index=True)
    fixed_holidays = Column(JSON, nullable=False, default=dict)  # {"0301": "삼일절"}
    variable_holidays = Column(JSON, nullable=False, default=dict)  # {"2025-10-06": "추석"}

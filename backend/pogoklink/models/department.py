"""
Department model.
"""

from sqlalchemy import Column, String, Boolean, Integer, Uuid
from sqlalchemy.orm import relationship
import uuid

from pogoklink.db.base import Base


class Department(Base):
    """School department; owns schedules and supplies their calendar colour."""

    __tablename__ = "departments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    dept_name = Column(String(50), nullable=False, index=True)
    dept_color = Column(String(7), nullable=False, default="#3788d8")  # #RRGGBB
    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0, index=True)

    # Relationships
    schedules = relationship("Schedule", back_populates="department")

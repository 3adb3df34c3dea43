"""
Pytest configuration and fixtures.
Provides a test HTTP client over in-memory SQLite and an in-memory backend.
"""

from typing import Dict, List, Optional, Sequence
from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import pogoklink.models  # noqa: F401
from pogoklink.main import app
from pogoklink.db.base import Base
from pogoklink.db import session as db_session
from pogoklink.db.session import get_db
from pogoklink.schemas.academic_settings import AcademicSettings
from pogoklink.schemas.department import DepartmentResponse
from pogoklink.schemas.schedule import ScheduleRecord, ScheduleResponse


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class InMemoryCalendarBackend:
    """CalendarBackend over plain lists, for service tests."""

    def __init__(self):
        self.settings: Dict[int, AcademicSettings] = {}
        self.departments: List[DepartmentResponse] = []
        self.schedules: List[ScheduleResponse] = []
        self.persist_calls: List[List[ScheduleRecord]] = []

    async def fetch_settings(self, year: Optional[int] = None) -> AcademicSettings:
        if year is None:
            if not self.settings:
                return AcademicSettings()
            year = max(self.settings)
        return self.settings.get(year, AcademicSettings(academic_year=year))

    async def fetch_departments(self) -> List[DepartmentResponse]:
        active = [dept for dept in self.departments if dept.is_active]
        return sorted(active, key=lambda dept: dept.sort_order)

    async def fetch_schedules(self) -> List[ScheduleResponse]:
        return list(self.schedules)

    async def get_schedule(self, schedule_id: UUID) -> Optional[ScheduleResponse]:
        for schedule in self.schedules:
            if schedule.id == schedule_id:
                return schedule
        return None

    async def persist(self, records: Sequence[ScheduleRecord]) -> List[ScheduleResponse]:
        self.persist_calls.append(list(records))
        saved = []
        for record in records:
            data = record.model_dump(exclude={"id"})
            if record.id is None:
                stored = ScheduleResponse(id=uuid4(), **data)
                self.schedules.append(stored)
            else:
                stored = ScheduleResponse(id=record.id, **data)
                self.schedules = [
                    stored if schedule.id == record.id else schedule
                    for schedule in self.schedules
                ]
            saved.append(stored)
        return saved

    async def delete_schedule(self, schedule_id: UUID) -> bool:
        before = len(self.schedules)
        self.schedules = [s for s in self.schedules if s.id != schedule_id]
        return len(self.schedules) < before


@pytest.fixture
def fake_backend() -> InMemoryCalendarBackend:
    return InMemoryCalendarBackend()


@pytest.fixture(scope="function")
async def test_session_maker():
    """
    Create a sessionmaker bound to a fresh in-memory database.
    """
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture(scope="function")
async def test_db_session(test_session_maker):
    """
    Create a test database session.
    """
    async with test_session_maker() as session:
        yield session


@pytest.fixture(scope="function")
async def test_client(test_session_maker, monkeypatch):
    """
    Create a test HTTP client whose requests use the test database.
    """
    async def override_get_db():
        async with test_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    monkeypatch.setattr(db_session, "async_session_maker", test_session_maker)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()

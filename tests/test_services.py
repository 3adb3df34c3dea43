"""
Calendar and schedule service tests against the in-memory backend.
"""

from datetime import date
from uuid import uuid4

import pytest

from pogoklink.core.exceptions import InvalidRecurrenceRange
from pogoklink.schemas.academic_settings import AcademicSettings
from pogoklink.schemas.department import DepartmentResponse
from pogoklink.schemas.schedule import ScheduleCreate, ScheduleUpdate, ScheduleImportRequest
from pogoklink.services.calendar_service import CalendarService
from pogoklink.services.schedule_service import ScheduleService


def staff_meeting(**overrides) -> ScheduleCreate:
    data = {
        "title": "Staff Meeting",
        "start_date": date(2025, 3, 3),
        "end_date": date(2025, 3, 4),
    }
    data.update(overrides)
    return ScheduleCreate(**data)


@pytest.mark.asyncio
async def test_create_single_schedule(fake_backend):
    service = ScheduleService(fake_backend)

    result = await service.create_schedule(staff_meeting())

    assert result.total == 1
    assert len(fake_backend.persist_calls) == 1
    assert fake_backend.schedules[0].title == "Staff Meeting"


@pytest.mark.asyncio
async def test_create_recurring_schedule_persists_every_occurrence(fake_backend):
    service = ScheduleService(fake_backend)

    result = await service.create_schedule(
        staff_meeting(recurrence={"frequency": "weekly", "until": "2025-03-24"})
    )

    assert result.total == 4
    assert [s.start_date for s in result.items] == [
        date(2025, 3, 3),
        date(2025, 3, 10),
        date(2025, 3, 17),
        date(2025, 3, 24),
    ]
    # one batch, all inserts
    assert len(fake_backend.persist_calls) == 1
    assert all(record.id is None for record in fake_backend.persist_calls[0])


@pytest.mark.asyncio
async def test_invalid_recurrence_persists_nothing(fake_backend):
    service = ScheduleService(fake_backend)

    with pytest.raises(InvalidRecurrenceRange):
        await service.create_schedule(
            staff_meeting(recurrence={"frequency": "monthly", "until": "2025-03-03"})
        )

    assert fake_backend.persist_calls == []
    assert fake_backend.schedules == []


@pytest.mark.asyncio
async def test_update_changes_only_given_fields(fake_backend):
    service = ScheduleService(fake_backend)
    created = await service.create_schedule(staff_meeting(description="Library"))
    schedule_id = created.items[0].id

    updated = await service.update_schedule(schedule_id, ScheduleUpdate(title="Staff Briefing"))

    assert updated.id == schedule_id
    assert updated.title == "Staff Briefing"
    assert updated.description == "Library"
    assert updated.start_date == date(2025, 3, 3)
    assert len(fake_backend.schedules) == 1


@pytest.mark.asyncio
async def test_update_rejects_dates_out_of_order(fake_backend):
    service = ScheduleService(fake_backend)
    created = await service.create_schedule(staff_meeting())

    with pytest.raises(ValueError):
        await service.update_schedule(
            created.items[0].id,
            ScheduleUpdate(start_date=date(2025, 3, 10)),
        )


@pytest.mark.asyncio
async def test_update_missing_schedule_returns_none(fake_backend):
    service = ScheduleService(fake_backend)
    assert await service.update_schedule(uuid4(), ScheduleUpdate(title="x")) is None


@pytest.mark.asyncio
async def test_delete_schedule(fake_backend):
    service = ScheduleService(fake_backend)
    created = await service.create_schedule(staff_meeting())

    assert await service.delete_schedule(created.items[0].id) is True
    assert await service.delete_schedule(created.items[0].id) is False


@pytest.mark.asyncio
async def test_search_uses_stored_order(fake_backend):
    service = ScheduleService(fake_backend)
    await service.create_schedule(staff_meeting(title="Math quiz"))
    await service.create_schedule(staff_meeting(title="Sports Day"))
    await service.create_schedule(staff_meeting(title="Review", description="math unit 3"))

    result = await service.search("MATH")

    assert [s.title for s in result.items] == ["Math quiz", "Review"]
    assert result.total == 2


@pytest.mark.asyncio
async def test_import_rows(fake_backend):
    dept = DepartmentResponse(id=uuid4(), dept_name="교무부", dept_color="#6b21a8")
    fake_backend.departments = [dept]
    service = ScheduleService(fake_backend)

    result = await service.import_rows(
        ScheduleImportRequest(rows=[
            ["입학식", "2025-03-04"],
            ["", "2025-03-05"],
        ])
    )

    assert result.inserted == 1
    assert result.skipped == 1
    assert result.items[0].dept_id == dept.id


@pytest.mark.asyncio
async def test_import_with_no_valid_rows_skips_persist(fake_backend):
    service = ScheduleService(fake_backend)

    result = await service.import_rows(ScheduleImportRequest(rows=[["only title"]]))

    assert result.inserted == 0
    assert fake_backend.persist_calls == []


@pytest.mark.asyncio
async def test_calendar_service_projects_backend_data(fake_backend):
    science = DepartmentResponse(id=uuid4(), dept_name="Science", dept_color="#00aa00", sort_order=1)
    retired = DepartmentResponse(id=uuid4(), dept_name="Old", dept_color="#000000", is_active=False)
    fake_backend.departments = [science, retired]
    fake_backend.settings = {
        2024: AcademicSettings(academic_year=2024, fixed_holidays={"0301": "Independence Day"}),
        2025: AcademicSettings(academic_year=2025, fixed_holidays={"0301": "Independence Day"}),
    }
    await ScheduleService(fake_backend).create_schedule(staff_meeting(dept_id=science.id))

    calendar = await CalendarService(fake_backend).get_calendar()

    assert calendar.academic_year == 2025
    assert calendar.total == 2
    assert calendar.entries[0].start == date(2025, 3, 1)
    assert calendar.entries[0].display == "background"
    assert calendar.entries[1].background_color == "#00aa00"
    assert [d.dept_name for d in calendar.departments] == ["Science"]


@pytest.mark.asyncio
async def test_calendar_service_without_settings_uses_reference_date(fake_backend):
    calendar = await CalendarService(fake_backend).get_calendar(today=date(2026, 2, 1))

    assert calendar.academic_year == 2025
    assert calendar.entries == []


@pytest.mark.asyncio
async def test_calendar_service_department_filter_keeps_holidays(fake_backend):
    science = DepartmentResponse(id=uuid4(), dept_name="Science", dept_color="#00aa00")
    fake_backend.departments = [science]
    fake_backend.settings = {2025: AcademicSettings(academic_year=2025, fixed_holidays={"0301": "Independence Day"})}
    service = ScheduleService(fake_backend)
    await service.create_schedule(staff_meeting(dept_id=science.id))
    await service.create_schedule(staff_meeting(title="Assembly"))

    calendar = await CalendarService(fake_backend).get_calendar(dept_ids=[science.id])

    assert [e.title for e in calendar.entries] == ["Independence Day", "Staff Meeting"]

"""
Schedule endpoint tests.
"""

import io

import pytest
from httpx import AsyncClient
from openpyxl import load_workbook

from pogoklink.utils.schedule_import import IMPORT_COLUMNS

SCHEDULES_URL = "/api/v1/schedules"


async def create_department(client: AsyncClient, name: str, color: str = "#6b21a8", sort_order: int = 0) -> dict:
    response = await client.post(
        "/api/v1/departments",
        json={"dept_name": name, "dept_color": color, "sort_order": sort_order},
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_single_schedule(test_client: AsyncClient):
    response = await test_client.post(
        SCHEDULES_URL,
        json={"title": "Staff Meeting", "start_date": "2025-03-03", "end_date": "2025-03-04"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["total"] == 1
    item = data["items"][0]
    assert item["title"] == "Staff Meeting"
    assert item["visibility"] == "internal"
    assert item["is_printable"] is True
    assert "id" in item


@pytest.mark.asyncio
async def test_create_recurring_schedule(test_client: AsyncClient):
    response = await test_client.post(
        SCHEDULES_URL,
        json={
            "title": "Staff Meeting",
            "start_date": "2025-03-03",
            "end_date": "2025-03-04",
            "recurrence": {"frequency": "weekly", "until": "2025-03-24"},
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["total"] == 4
    assert [i["start_date"] for i in data["items"]] == [
        "2025-03-03",
        "2025-03-10",
        "2025-03-17",
        "2025-03-24",
    ]
    assert [i["end_date"] for i in data["items"]][-1] == "2025-03-25"

    listed = await test_client.get(SCHEDULES_URL)
    assert listed.json()["total"] == 4


@pytest.mark.asyncio
async def test_create_recurring_schedule_with_invalid_range(test_client: AsyncClient):
    response = await test_client.post(
        SCHEDULES_URL,
        json={
            "title": "Staff Meeting",
            "start_date": "2025-03-03",
            "end_date": "2025-03-03",
            "recurrence": {"frequency": "monthly", "until": "2025-03-01"},
        },
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "invalid_recurrence_range"

    listed = await test_client.get(SCHEDULES_URL)
    assert listed.json()["total"] == 0


@pytest.mark.asyncio
async def test_create_schedule_rejects_end_before_start(test_client: AsyncClient):
    response = await test_client.post(
        SCHEDULES_URL,
        json={"title": "Backwards", "start_date": "2025-03-10", "end_date": "2025-03-03"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_schedule_rejects_unknown_frequency(test_client: AsyncClient):
    response = await test_client.post(
        SCHEDULES_URL,
        json={
            "title": "Daily",
            "start_date": "2025-03-03",
            "end_date": "2025-03-03",
            "recurrence": {"frequency": "daily", "until": "2025-03-10"},
        },
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_update_delete_schedule(test_client: AsyncClient):
    created = await test_client.post(
        SCHEDULES_URL,
        json={
            "title": "Sports Day",
            "start_date": "2025-05-02",
            "end_date": "2025-05-02",
            "description": "Main field",
        },
    )
    schedule_id = created.json()["items"][0]["id"]

    response = await test_client.get(f"{SCHEDULES_URL}/{schedule_id}")
    assert response.status_code == 200
    assert response.json()["title"] == "Sports Day"

    response = await test_client.put(
        f"{SCHEDULES_URL}/{schedule_id}",
        json={"end_date": "2025-05-03", "visibility": "public"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["end_date"] == "2025-05-03"
    assert data["visibility"] == "public"
    assert data["description"] == "Main field"

    response = await test_client.delete(f"{SCHEDULES_URL}/{schedule_id}")
    assert response.status_code == 204

    response = await test_client.get(f"{SCHEDULES_URL}/{schedule_id}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_with_dates_out_of_order(test_client: AsyncClient):
    created = await test_client.post(
        SCHEDULES_URL,
        json={"title": "Exam", "start_date": "2025-06-02", "end_date": "2025-06-04"},
    )
    schedule_id = created.json()["items"][0]["id"]

    response = await test_client.put(f"{SCHEDULES_URL}/{schedule_id}", json={"start_date": "2025-06-10"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_missing_schedule_returns_404(test_client: AsyncClient):
    missing = "00000000-0000-0000-0000-000000000000"

    assert (await test_client.get(f"{SCHEDULES_URL}/{missing}")).status_code == 404
    assert (await test_client.put(f"{SCHEDULES_URL}/{missing}", json={"title": "x"})).status_code == 404
    assert (await test_client.delete(f"{SCHEDULES_URL}/{missing}")).status_code == 404


@pytest.mark.asyncio
async def test_search_schedules(test_client: AsyncClient):
    for title, description in [
        ("Math quiz", ""),
        ("Sports Day", "Main field"),
        ("Review", "MATH unit 3"),
    ]:
        await test_client.post(
            SCHEDULES_URL,
            json={
                "title": title,
                "start_date": "2025-03-03",
                "end_date": "2025-03-03",
                "description": description,
            },
        )

    response = await test_client.get(f"{SCHEDULES_URL}/search", params={"q": "math"})

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert [i["title"] for i in data["items"]] == ["Math quiz", "Review"]


@pytest.mark.asyncio
async def test_search_requires_two_characters(test_client: AsyncClient):
    response = await test_client.get(f"{SCHEDULES_URL}/search", params={"q": "m"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_import_schedules(test_client: AsyncClient):
    academics = await create_department(test_client, "교무부", sort_order=0)
    science = await create_department(test_client, "과학부", "#00aa00", sort_order=1)

    response = await test_client.post(
        f"{SCHEDULES_URL}/import",
        json={
            "rows": [
                ["과학 실험", "2025-04-01", "2025-04-02", "3층", "과학부", "전체"],
                ["개학식", "2025-03-03"],
                ["", "2025-03-05"],
                ["Bad", "not a date"],
            ]
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["inserted"] == 2
    assert data["skipped"] == 2
    first, second = data["items"]
    assert first["dept_id"] == science["id"]
    assert first["visibility"] == "public"
    assert second["dept_id"] == academics["id"]
    assert second["end_date"] == "2025-03-03"


@pytest.mark.asyncio
async def test_import_requires_rows(test_client: AsyncClient):
    response = await test_client.post(f"{SCHEDULES_URL}/import", json={"rows": []})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_download_import_template(test_client: AsyncClient):
    response = await test_client.get(f"{SCHEDULES_URL}/import-template")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert "attachment" in response.headers["content-disposition"]

    workbook = load_workbook(io.BytesIO(response.content))
    sheet = workbook.active
    assert [cell.value for cell in sheet[1]] == IMPORT_COLUMNS


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["start_date", "end_date", "title"])
async def test_update_rejects_null_for_required_field(test_client: AsyncClient, field):
    created = await test_client.post(
        SCHEDULES_URL,
        json={"title": "Exam", "start_date": "2025-06-02", "end_date": "2025-06-04"},
    )
    schedule_id = created.json()["items"][0]["id"]

    response = await test_client.put(f"{SCHEDULES_URL}/{schedule_id}", json={field: None})

    assert response.status_code == 422
    stored = (await test_client.get(f"{SCHEDULES_URL}/{schedule_id}")).json()
    assert stored["start_date"] == "2025-06-02"
    assert stored["end_date"] == "2025-06-04"


@pytest.mark.asyncio
async def test_update_allows_clearing_department(test_client: AsyncClient):
    dept = await create_department(test_client, "Science")
    created = await test_client.post(
        SCHEDULES_URL,
        json={"title": "Lab", "start_date": "2025-06-02", "end_date": "2025-06-02", "dept_id": dept["id"]},
    )
    schedule_id = created.json()["items"][0]["id"]

    response = await test_client.put(f"{SCHEDULES_URL}/{schedule_id}", json={"dept_id": None})

    assert response.status_code == 200
    assert response.json()["dept_id"] is None


@pytest.mark.asyncio
async def test_import_with_non_text_department_cell(test_client: AsyncClient):
    academics = await create_department(test_client, "교무부")

    response = await test_client.post(
        f"{SCHEDULES_URL}/import",
        json={"rows": [["Exam", "2025-03-03", "2025-03-03", "", ["Math"], "전체"]]},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["inserted"] == 1
    assert data["items"][0]["dept_id"] == academics["id"]

"""
Schedule API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from pogoklink.db.session import get_db
from pogoklink.controllers.schedule_controller import ScheduleController
from pogoklink.services.schedule_excel_service import TEMPLATE_FILENAME
from pogoklink.utils.schedule_search import MIN_QUERY_LENGTH
from pogoklink.schemas.schedule import (
    ScheduleCreate,
    ScheduleUpdate,
    ScheduleResponse,
    ScheduleListResponse,
    ScheduleImportRequest,
    ScheduleImportResponse,
)

router = APIRouter()


@router.post("", response_model=ScheduleListResponse, status_code=status.HTTP_201_CREATED)
async def create_schedule(
    schedule_data: ScheduleCreate,
    db: AsyncSession = Depends(get_db),
) -> ScheduleListResponse:
    """
    Create a schedule; a recurrence creates one row per occurrence.

    An invalid recurrence range is answered with 400 by the application
    exception handler and nothing is stored.
    """
    controller = ScheduleController(db)
    return await controller.create_schedule(schedule_data)


@router.get("", response_model=ScheduleListResponse)
async def list_schedules(
    db: AsyncSession = Depends(get_db),
) -> ScheduleListResponse:
    """List all schedules."""
    controller = ScheduleController(db)
    return await controller.list_schedules()


@router.get("/search", response_model=ScheduleListResponse)
async def search_schedules(
    q: str = Query(..., min_length=MIN_QUERY_LENGTH, max_length=100),
    db: AsyncSession = Depends(get_db),
) -> ScheduleListResponse:
    """Search schedules by title and description."""
    controller = ScheduleController(db)
    return await controller.search_schedules(q)


@router.get("/import-template")
async def download_import_template(
    db: AsyncSession = Depends(get_db),
):
    """Download the Excel template for bulk schedule import."""
    controller = ScheduleController(db)
    output = controller.build_import_template()
    return StreamingResponse(
        output,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={
            "Content-Disposition": f"attachment; filename={TEMPLATE_FILENAME}"
        },
    )


@router.post("/import", response_model=ScheduleImportResponse, status_code=status.HTTP_201_CREATED)
async def import_schedules(
    import_data: ScheduleImportRequest,
    db: AsyncSession = Depends(get_db),
) -> ScheduleImportResponse:
    """Bulk import schedules from tabulated sheet rows."""
    controller = ScheduleController(db)
    return await controller.import_schedules(import_data)


@router.get("/{schedule_id}", response_model=ScheduleResponse)
async def get_schedule(
    schedule_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> ScheduleResponse:
    """Get schedule by ID."""
    controller = ScheduleController(db)
    schedule = await controller.get_schedule(schedule_id)
    if not schedule:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Schedule not found",
        )
    return schedule


@router.put("/{schedule_id}", response_model=ScheduleResponse)
async def update_schedule(
    schedule_id: UUID,
    schedule_data: ScheduleUpdate,
    db: AsyncSession = Depends(get_db),
) -> ScheduleResponse:
    """Update a single schedule."""
    controller = ScheduleController(db)
    try:
        schedule = await controller.update_schedule(schedule_id, schedule_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not schedule:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Schedule not found",
        )
    return schedule


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_schedule(
    schedule_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a schedule."""
    controller = ScheduleController(db)
    deleted = await controller.delete_schedule(schedule_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Schedule not found",
        )

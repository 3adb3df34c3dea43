"""
Department API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from pogoklink.db.session import get_db
from pogoklink.controllers.department_controller import DepartmentController
from pogoklink.schemas.department import (
    DepartmentCreate,
    DepartmentUpdate,
    DepartmentBulkUpdate,
    DepartmentResponse,
    DepartmentListResponse,
)

router = APIRouter()


@router.get("", response_model=DepartmentListResponse)
async def list_departments(
    include_inactive: bool = Query(False),
    db: AsyncSession = Depends(get_db),
) -> DepartmentListResponse:
    """List departments in display order."""
    controller = DepartmentController(db)
    return await controller.list_departments(include_inactive=include_inactive)


@router.post("", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
async def create_department(
    department_data: DepartmentCreate,
    db: AsyncSession = Depends(get_db),
) -> DepartmentResponse:
    """Create a new department."""
    controller = DepartmentController(db)
    return await controller.create_department(department_data)


@router.put("", response_model=DepartmentListResponse)
async def bulk_update_departments(
    bulk_data: DepartmentBulkUpdate,
    db: AsyncSession = Depends(get_db),
) -> DepartmentListResponse:
    """Save names and colours of several departments."""
    controller = DepartmentController(db)
    try:
        return await controller.bulk_update_departments(bulk_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.get("/{department_id}", response_model=DepartmentResponse)
async def get_department(
    department_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> DepartmentResponse:
    """Get department by ID."""
    controller = DepartmentController(db)
    department = await controller.get_department(department_id)
    if not department:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Department not found",
        )
    return department


@router.put("/{department_id}", response_model=DepartmentResponse)
async def update_department(
    department_id: UUID,
    department_data: DepartmentUpdate,
    db: AsyncSession = Depends(get_db),
) -> DepartmentResponse:
    """Update a department."""
    controller = DepartmentController(db)
    department = await controller.update_department(department_id, department_data)
    if not department:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Department not found",
        )
    return department


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_department(
    department_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a department."""
    controller = DepartmentController(db)
    deleted = await controller.delete_department(department_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Department not found",
        )

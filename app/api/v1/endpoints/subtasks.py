"""Subtask router: nested under tasks for listing/creation, flat for the rest."""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import aget_db
from app.schemas.subtaskSchema import (
    SubtaskCreateRequest,
    SubtaskReorderRequest,
    SubtaskResponse,
    SubtaskUpdateRequest,
)
from app.services.SubtaskService import SubtaskService

router = APIRouter(tags=["subtasks"])


@router.get("/tasks/{task_id}/subtasks", response_model=List[SubtaskResponse])
async def list_subtasks(
    task_id: int,
    db: AsyncSession = Depends(aget_db)
):
    """Get all subtasks for a parent task, ordered by position."""
    return await SubtaskService(db).find_all_by_task(task_id)


@router.post("/tasks/{task_id}/subtasks", response_model=SubtaskResponse, status_code=status.HTTP_201_CREATED)
async def create_subtask(
    task_id: int,
    subtask_data: SubtaskCreateRequest,
    db: AsyncSession = Depends(aget_db)
):
    """Create a subtask; without a position it is appended to the end."""
    return await SubtaskService(db).create(task_id, subtask_data)


@router.get("/subtasks/{subtask_id}", response_model=SubtaskResponse)
async def get_subtask(
    subtask_id: int,
    db: AsyncSession = Depends(aget_db)
):
    return await SubtaskService(db).find_one(subtask_id)


@router.patch("/subtasks/{subtask_id}", response_model=SubtaskResponse)
async def update_subtask(
    subtask_id: int,
    subtask_data: SubtaskUpdateRequest,
    db: AsyncSession = Depends(aget_db)
):
    """Update subtask title, status, or position (partial update)."""
    return await SubtaskService(db).update(subtask_id, subtask_data)


@router.patch("/subtasks/{subtask_id}/reorder", response_model=SubtaskResponse)
async def reorder_subtask(
    subtask_id: int,
    reorder_data: SubtaskReorderRequest,
    db: AsyncSession = Depends(aget_db)
):
    """Update subtask position for drag-and-drop reordering."""
    return await SubtaskService(db).reorder(subtask_id, reorder_data)


@router.delete("/subtasks/{subtask_id}", response_model=SubtaskResponse)
async def delete_subtask(
    subtask_id: int,
    db: AsyncSession = Depends(aget_db)
):
    return await SubtaskService(db).remove(subtask_id)

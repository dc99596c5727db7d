"""Task management router."""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.constants.constants import TaskStatus, Workspace
from app.core.database import aget_db
from app.schemas.taskSchema import TaskCreateRequest, TaskFilterRequest, TaskResponse, TaskUpdateRequest
from app.services.TaskService import TaskService

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"]
)


@router.get("", response_model=List[TaskResponse])
async def list_tasks(
    workspace: Optional[Workspace] = None,
    task_status: Optional[TaskStatus] = Query(None, alias="status"),
    channel_id: Optional[int] = Query(None, alias="channelId"),
    db: AsyncSession = Depends(aget_db)
):
    """
    Get all tasks, newest first.
    Optional filters: workspace, status, channelId (combined with AND)
    """
    filters = TaskFilterRequest(workspace=workspace, status=task_status, channel_id=channel_id)
    return await TaskService(db).find_all(filters)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreateRequest,
    db: AsyncSession = Depends(aget_db)
):
    """Create a new task. Status defaults to BACKLOG when omitted."""
    return await TaskService(db).create(task_data)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    db: AsyncSession = Depends(aget_db)
):
    return await TaskService(db).find_one(task_id)


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    task_data: TaskUpdateRequest,
    db: AsyncSession = Depends(aget_db)
):
    """Partially update a task; omitted fields are left unchanged."""
    return await TaskService(db).update(task_id, task_data)


@router.delete("/{task_id}", response_model=TaskResponse)
async def delete_task(
    task_id: int,
    db: AsyncSession = Depends(aget_db)
):
    """Delete a task together with its subtasks and tag links."""
    return await TaskService(db).remove(task_id)

"""Tag router, including the task-tag association endpoints."""

from typing import List, Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.constants.constants import Workspace
from app.core.database import aget_db
from app.schemas.tagSchema import (
    TagCreateRequest,
    TagDetailResponse,
    TagFilterRequest,
    TagResponse,
    TagUpdateRequest,
)
from app.services.TagService import TagService

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=List[TagResponse])
async def list_tags(
    workspace: Optional[Workspace] = None,
    db: AsyncSession = Depends(aget_db)
):
    """Get all tags sorted by name, optionally only those offered in a workspace."""
    return await TagService(db).find_all(TagFilterRequest(workspace=workspace))


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    tag_data: TagCreateRequest,
    db: AsyncSession = Depends(aget_db)
):
    """Create a tag. Fails with 409 when the name is already taken."""
    return await TagService(db).create(tag_data)


@router.get("/{tag_id}", response_model=TagDetailResponse)
async def get_tag(
    tag_id: int,
    db: AsyncSession = Depends(aget_db)
):
    """Get a tag with the tasks it is attached to."""
    return await TagService(db).find_one(tag_id)


@router.patch("/{tag_id}", response_model=TagResponse)
async def update_tag(
    tag_id: int,
    tag_data: TagUpdateRequest,
    db: AsyncSession = Depends(aget_db)
):
    return await TagService(db).update(tag_id, tag_data)


@router.delete("/{tag_id}", response_model=TagResponse)
async def delete_tag(
    tag_id: int,
    db: AsyncSession = Depends(aget_db)
):
    return await TagService(db).remove(tag_id)


@router.post("/tasks/{task_id}/tags/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def add_tag_to_task(
    task_id: int,
    tag_id: int,
    db: AsyncSession = Depends(aget_db)
):
    """Attach a tag to a task."""
    await TagService(db).add_tag_to_task(task_id, tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/tasks/{task_id}/tags/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_tag_from_task(
    task_id: int,
    tag_id: int,
    db: AsyncSession = Depends(aget_db)
):
    """Detach a tag from a task."""
    await TagService(db).remove_tag_from_task(task_id, tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

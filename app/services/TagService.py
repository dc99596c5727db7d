"""Tag service: tag CRUD and task-tag associations."""

import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import ConflictError, NotFoundError
from app.models.tag import Tag, TagWorkspace, TaskTag
from app.models.task import Task
from app.schemas.tagSchema import TagCreateRequest, TagFilterRequest, TagUpdateRequest

logger = logging.getLogger(__name__)


class TagService:
    """
    Business logic for tags.

    Tag names are unique (exact, case-sensitive match). The check runs before
    every write and the ``tags.name`` unique constraint backs it up: a
    constraint violation raised inside the write's savepoint is reported as a
    conflict as well.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self, filters: TagFilterRequest) -> List[Tag]:
        """List tags by name; a workspace filter keeps tags offered in that workspace."""
        query = select(Tag)
        if filters.workspace:
            query = query.where(Tag.workspace_links.any(TagWorkspace.workspace == filters.workspace))
        query = query.order_by(Tag.name.asc())

        result = await self.db.execute(query.execution_options(populate_existing=True))
        return list(result.scalars().all())

    async def find_one(self, tag_id: int) -> Tag:
        """Get a tag together with its task associations and their tasks."""
        result = await self.db.execute(
            select(Tag)
            .options(selectinload(Tag.task_tags).selectinload(TaskTag.task))
            .where(Tag.id == tag_id)
            .execution_options(populate_existing=True)
        )
        tag = result.scalar_one_or_none()
        if not tag:
            raise NotFoundError(f"Tag with ID {tag_id} not found")
        return tag

    async def create(self, data: TagCreateRequest) -> Tag:
        await self._ensure_name_available(data.name)

        tag = Tag(name=data.name, color=data.color)
        tag.set_workspaces(data.workspaces)
        try:
            async with self.db.begin_nested():
                self.db.add(tag)
        except IntegrityError:
            raise self._name_conflict(data.name)

        logger.info(f"Created tag {tag.id} '{tag.name}'")
        return await self._get(tag.id)

    async def update(self, tag_id: int, data: TagUpdateRequest) -> Tag:
        tag = await self._get(tag_id)

        changes = data.changes()
        name = changes.get("name")
        if name:
            await self._ensure_name_available(name, exclude_id=tag_id)

        try:
            async with self.db.begin_nested():
                if "workspaces" in changes:
                    tag.set_workspaces(changes.pop("workspaces"))
                for field, value in changes.items():
                    setattr(tag, field, value)
        except IntegrityError:
            if name is not None:
                raise self._name_conflict(name)
            logger.warning(f"Tag {tag_id} update rejected by a storage constraint")
            raise ConflictError(f"Tag with ID {tag_id} conflicts with existing data")

        return await self._get(tag_id)

    async def remove(self, tag_id: int) -> Tag:
        """Delete a tag; its task associations are removed by ON DELETE CASCADE."""
        tag = await self._get(tag_id)
        await self.db.delete(tag)
        await self.db.flush()
        logger.info(f"Deleted tag {tag_id}")
        return tag

    async def add_tag_to_task(self, task_id: int, tag_id: int) -> None:
        task = await self.db.get(Task, task_id, populate_existing=True)
        if not task:
            raise NotFoundError(f"Task with ID {task_id} not found")

        tag = await self.db.get(Tag, tag_id, populate_existing=True)
        if not tag:
            raise NotFoundError(f"Tag with ID {tag_id} not found")

        existing = await self.db.get(TaskTag, (task_id, tag_id), populate_existing=True)
        if existing:
            raise self._association_conflict(task_id, tag_id)

        try:
            async with self.db.begin_nested():
                self.db.add(TaskTag(task_id=task_id, tag_id=tag_id))
        except IntegrityError:
            raise self._association_conflict(task_id, tag_id)

    async def remove_tag_from_task(self, task_id: int, tag_id: int) -> None:
        association = await self.db.get(TaskTag, (task_id, tag_id), populate_existing=True)
        if not association:
            raise NotFoundError(f"Tag {tag_id} is not associated with task {task_id}")

        await self.db.delete(association)
        await self.db.flush()

    async def _get(self, tag_id: int) -> Tag:
        tag = await self.db.get(Tag, tag_id, populate_existing=True)
        if not tag:
            raise NotFoundError(f"Tag with ID {tag_id} not found")
        return tag

    async def _ensure_name_available(self, name: str, exclude_id: Optional[int] = None) -> None:
        query = select(Tag.id).where(Tag.name == name)
        if exclude_id is not None:
            query = query.where(Tag.id != exclude_id)
        if await self.db.scalar(query) is not None:
            raise self._name_conflict(name)

    @staticmethod
    def _name_conflict(name: str) -> ConflictError:
        logger.warning(f"Tag name conflict: '{name}'")
        return ConflictError(f'Tag with name "{name}" already exists')

    @staticmethod
    def _association_conflict(task_id: int, tag_id: int) -> ConflictError:
        return ConflictError(f"Tag {tag_id} is already associated with task {task_id}")

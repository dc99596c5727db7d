"""Subtask service: ordered checklist items under a task."""

import logging
from datetime import datetime
from typing import List
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.constants.constants import SubtaskStatus
from app.core.exceptions import NotFoundError
from app.models.subtask import Subtask
from app.models.task import Task
from app.schemas.subtaskSchema import SubtaskCreateRequest, SubtaskReorderRequest, SubtaskUpdateRequest

logger = logging.getLogger(__name__)


class SubtaskService:
    """Business logic for subtasks, always returning the subtask with its parent task."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all_by_task(self, task_id: int) -> List[Subtask]:
        """List a task's subtasks by ascending position."""
        await self._ensure_task(task_id)

        result = await self.db.execute(
            select(Subtask)
            .options(selectinload(Subtask.task))
            .where(Subtask.task_id == task_id)
            .order_by(Subtask.position.asc(), Subtask.id.asc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def find_one(self, subtask_id: int) -> Subtask:
        result = await self.db.execute(
            select(Subtask)
            .options(selectinload(Subtask.task))
            .where(Subtask.id == subtask_id)
            .execution_options(populate_existing=True)
        )
        subtask = result.scalar_one_or_none()
        if not subtask:
            raise NotFoundError(f"Subtask with ID {subtask_id} not found")
        return subtask

    async def create(self, task_id: int, data: SubtaskCreateRequest) -> Subtask:
        """
        Create a subtask under ``task_id``.

        Without an explicit position the subtask is appended after the
        current highest position (0 for the first subtask). New subtasks
        always start as TODO.
        """
        await self._ensure_task(task_id)

        position = data.position
        if position is None:
            max_position = await self.db.scalar(
                select(func.max(Subtask.position)).where(Subtask.task_id == task_id)
            )
            position = (max_position if max_position is not None else -1) + 1

        subtask = Subtask(
            task_id=task_id,
            title=data.title,
            position=position,
            status=SubtaskStatus.TODO,
        )
        self.db.add(subtask)
        await self.db.flush()
        logger.info(f"Created subtask {subtask.id} for task {task_id} at position {position}")
        return await self.find_one(subtask.id)

    async def update(self, subtask_id: int, data: SubtaskUpdateRequest) -> Subtask:
        subtask = await self.find_one(subtask_id)

        changes = data.changes()
        if "status" in changes:
            # completed_at tracks DONE exactly, including DONE -> TODO/DOING.
            subtask.completed_at = datetime.utcnow() if changes["status"] == SubtaskStatus.DONE else None

        for field, value in changes.items():
            setattr(subtask, field, value)

        await self.db.flush()
        return await self.find_one(subtask_id)

    async def reorder(self, subtask_id: int, data: SubtaskReorderRequest) -> Subtask:
        """Move a subtask to a new position (drag-and-drop); nothing else changes."""
        subtask = await self.find_one(subtask_id)
        subtask.position = data.position
        await self.db.flush()
        return await self.find_one(subtask_id)

    async def remove(self, subtask_id: int) -> Subtask:
        subtask = await self.find_one(subtask_id)
        await self.db.delete(subtask)
        await self.db.flush()
        logger.info(f"Deleted subtask {subtask_id}")
        return subtask

    async def _ensure_task(self, task_id: int) -> None:
        task = await self.db.get(Task, task_id, populate_existing=True)
        if not task:
            raise NotFoundError(f"Task with ID {task_id} not found")

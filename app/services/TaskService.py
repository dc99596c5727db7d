"""Task service: CRUD over tasks, always returning the task with its channel."""

import logging
from typing import List
from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.core.exceptions import NotFoundError
from app.models.channel import Channel
from app.models.task import Task
from app.schemas.taskSchema import TaskCreateRequest, TaskFilterRequest, TaskUpdateRequest
from app.utils.dates import parse_due_date

logger = logging.getLogger(__name__)


class TaskService:
    """Business logic for tasks."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self, filters: TaskFilterRequest) -> List[Task]:
        """List tasks matching every given filter, newest first."""
        conditions = []
        if filters.workspace:
            conditions.append(Task.workspace == filters.workspace)
        if filters.status:
            conditions.append(Task.status == filters.status)
        if filters.channel_id is not None:
            conditions.append(Task.channel_id == filters.channel_id)

        query = select(Task).options(joinedload(Task.channel))
        if conditions:
            query = query.where(and_(*conditions))
        query = query.order_by(Task.created_at.desc(), Task.id.desc())

        result = await self.db.execute(query.execution_options(populate_existing=True))
        return list(result.scalars().all())

    async def find_one(self, task_id: int) -> Task:
        result = await self.db.execute(
            select(Task)
            .options(joinedload(Task.channel))
            .where(Task.id == task_id)
            .execution_options(populate_existing=True)
        )
        task = result.scalar_one_or_none()
        if not task:
            raise NotFoundError(f"Task with ID {task_id} not found")
        return task

    async def create(self, data: TaskCreateRequest) -> Task:
        """
        Create a task.

        Only fields the caller actually sent are written, so column defaults
        (status BACKLOG, is_routine False) apply to everything omitted.
        """
        values = {key: value for key, value in data.model_dump(exclude_unset=True).items() if value is not None}
        if "due_date" in values:
            values["due_date"] = parse_due_date(values["due_date"])
        if "channel_id" in values:
            await self._ensure_channel(values["channel_id"])

        task = Task(**values)
        self.db.add(task)
        await self.db.flush()
        logger.info(f"Created task {task.id} in {task.workspace.value}")
        return await self.find_one(task.id)

    async def update(self, task_id: int, data: TaskUpdateRequest) -> Task:
        task = await self.find_one(task_id)

        changes = data.changes()
        if changes.get("due_date") is not None:
            changes["due_date"] = parse_due_date(changes["due_date"])
        if changes.get("channel_id") is not None:
            await self._ensure_channel(changes["channel_id"])

        for field, value in changes.items():
            setattr(task, field, value)

        await self.db.flush()
        return await self.find_one(task_id)

    async def remove(self, task_id: int) -> Task:
        """Delete a task; its subtasks and tag links go with it via ON DELETE CASCADE."""
        task = await self.find_one(task_id)
        await self.db.delete(task)
        await self.db.flush()
        logger.info(f"Deleted task {task_id}")
        return task

    async def _ensure_channel(self, channel_id: int) -> None:
        channel = await self.db.get(Channel, channel_id, populate_existing=True)
        if not channel:
            raise NotFoundError(f"Channel with ID {channel_id} not found")

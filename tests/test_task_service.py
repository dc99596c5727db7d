# tests/test_task_service.py

from datetime import datetime

import pytest

from app.constants.constants import TaskStatus, Workspace
from app.core.exceptions import NotFoundError
from app.schemas.taskSchema import TaskCreateRequest, TaskFilterRequest, TaskUpdateRequest


@pytest.mark.asyncio
async def test_create_applies_defaults_for_omitted_fields(task_service):
    task = await task_service.create(TaskCreateRequest(title="Ship release", workspace=Workspace.WORK))

    assert task.id is not None
    assert task.status == TaskStatus.BACKLOG
    assert task.is_routine is False
    assert task.description is None
    assert task.due_date is None
    assert task.channel_id is None
    assert task.channel is None
    assert task.created_at is not None and task.updated_at is not None


@pytest.mark.asyncio
async def test_create_with_optional_fields(task_service, work_channel):
    task = await task_service.create(
        TaskCreateRequest(
            title="Plan sprint",
            workspace=Workspace.WORK,
            description="Pick the stories",
            channel_id=work_channel.id,
            status=TaskStatus.TODAY,
            due_date="2025-03-01",
            is_routine=True,
        )
    )

    assert task.status == TaskStatus.TODAY
    assert task.is_routine is True
    assert task.description == "Pick the stories"
    assert task.due_date == datetime(2025, 3, 1)
    assert task.channel.name == "Development"


@pytest.mark.asyncio
async def test_create_parses_utc_due_date(task_service):
    task = await task_service.create(
        TaskCreateRequest(title="Call", workspace=Workspace.PERSONAL, due_date="2025-03-01T10:30:00Z")
    )
    assert task.due_date == datetime(2025, 3, 1, 10, 30)


@pytest.mark.asyncio
async def test_create_with_unknown_channel_fails(task_service):
    with pytest.raises(NotFoundError, match="Channel with ID 999 not found"):
        await task_service.create(TaskCreateRequest(title="Orphan", workspace=Workspace.WORK, channel_id=999))


@pytest.mark.asyncio
async def test_find_all_orders_newest_first_and_ands_filters(task_service, work_channel):
    first = await task_service.create(TaskCreateRequest(title="a", workspace=Workspace.WORK))
    second = await task_service.create(
        TaskCreateRequest(title="b", workspace=Workspace.WORK, status=TaskStatus.TODAY, channel_id=work_channel.id)
    )
    third = await task_service.create(TaskCreateRequest(title="c", workspace=Workspace.PERSONAL, status=TaskStatus.TODAY))

    everything = await task_service.find_all(TaskFilterRequest())
    assert [t.id for t in everything] == [third.id, second.id, first.id]

    work_today = await task_service.find_all(TaskFilterRequest(workspace=Workspace.WORK, status=TaskStatus.TODAY))
    assert [t.id for t in work_today] == [second.id]

    in_channel = await task_service.find_all(TaskFilterRequest(channel_id=work_channel.id))
    assert [t.id for t in in_channel] == [second.id]
    assert in_channel[0].channel.id == work_channel.id


@pytest.mark.asyncio
async def test_find_one_missing_task(task_service):
    with pytest.raises(NotFoundError, match="Task with ID 42 not found"):
        await task_service.find_one(42)


@pytest.mark.asyncio
async def test_update_only_touches_provided_fields(task_service):
    task = await task_service.create(
        TaskCreateRequest(title="Draft", workspace=Workspace.WORK, description="keep me", due_date="2025-01-02")
    )

    updated = await task_service.update(task.id, TaskUpdateRequest(title="Final", status=TaskStatus.IN_PROGRESS))

    assert updated.title == "Final"
    assert updated.status == TaskStatus.IN_PROGRESS
    assert updated.description == "keep me"
    assert updated.due_date == datetime(2025, 1, 2)
    assert updated.workspace == Workspace.WORK


@pytest.mark.asyncio
async def test_update_explicit_null_clears_nullable_fields(task_service, work_channel):
    task = await task_service.create(
        TaskCreateRequest(
            title="Draft",
            workspace=Workspace.WORK,
            description="remove me",
            channel_id=work_channel.id,
            due_date="2025-01-02",
        )
    )

    updated = await task_service.update(
        task.id, TaskUpdateRequest(description=None, channel_id=None, due_date=None)
    )

    assert updated.description is None
    assert updated.channel_id is None
    assert updated.channel is None
    assert updated.due_date is None
    assert updated.title == "Draft"


@pytest.mark.asyncio
async def test_update_reparses_due_date(task_service, task):
    updated = await task_service.update(task.id, TaskUpdateRequest(due_date="2026-07-04T00:00:00+02:00"))
    assert updated.due_date == datetime(2026, 7, 3, 22, 0)


@pytest.mark.asyncio
async def test_update_missing_task(task_service):
    with pytest.raises(NotFoundError):
        await task_service.update(7, TaskUpdateRequest(title="nope"))


@pytest.mark.asyncio
async def test_remove_returns_prior_task_and_deletes(task_service, task):
    removed = await task_service.remove(task.id)

    assert removed.id == task.id
    assert removed.title == "Ship release"
    with pytest.raises(NotFoundError):
        await task_service.find_one(task.id)
    with pytest.raises(NotFoundError):
        await task_service.remove(task.id)

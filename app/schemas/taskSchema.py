from datetime import datetime
from typing import ClassVar, FrozenSet, Optional
from pydantic import Field, field_validator

from app.constants.constants import TASK_TITLE_MAX_LENGTH, TaskStatus, Workspace
from app.schemas.baseSchema import CamelModel, PartialUpdateModel
from app.schemas.channelSchema import ChannelResponse
from app.utils.dates import parse_due_date


def _check_due_date(value: Optional[str]) -> Optional[str]:
    if value is not None:
        parse_due_date(value)
    return value


class TaskSummaryResponse(CamelModel):
    """Task fields without relations."""
    id: int
    title: str
    description: Optional[str] = None
    workspace: Workspace
    channel_id: Optional[int] = None
    status: TaskStatus
    due_date: Optional[datetime] = None
    is_routine: bool
    created_at: datetime
    updated_at: datetime


class TaskResponse(TaskSummaryResponse):
    channel: Optional[ChannelResponse] = None


class TaskCreateRequest(CamelModel):
    """Request schema for creating a new task."""
    title: str = Field(..., min_length=1, max_length=TASK_TITLE_MAX_LENGTH)
    description: Optional[str] = None
    workspace: Workspace
    channel_id: Optional[int] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[str] = None
    is_routine: Optional[bool] = None

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, value):
        return _check_due_date(value)


class TaskUpdateRequest(PartialUpdateModel):
    """Request schema for updating a task."""
    NON_NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"title", "workspace", "status", "is_routine"})

    title: Optional[str] = Field(None, min_length=1, max_length=TASK_TITLE_MAX_LENGTH)
    description: Optional[str] = None
    workspace: Optional[Workspace] = None
    channel_id: Optional[int] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[str] = None
    is_routine: Optional[bool] = None

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, value):
        return _check_due_date(value)


class TaskFilterRequest(CamelModel):
    """Query filters for listing tasks. Absent filters impose no constraint."""
    workspace: Optional[Workspace] = None
    status: Optional[TaskStatus] = None
    channel_id: Optional[int] = None

from datetime import datetime
from typing import ClassVar, FrozenSet, Optional
from pydantic import Field

from app.constants.constants import SUBTASK_TITLE_MAX_LENGTH, SubtaskStatus
from app.schemas.baseSchema import CamelModel, PartialUpdateModel
from app.schemas.taskSchema import TaskSummaryResponse


class SubtaskResponse(CamelModel):
    id: int
    task_id: int
    title: str
    status: SubtaskStatus
    position: int
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    task: Optional[TaskSummaryResponse] = None


class SubtaskCreateRequest(CamelModel):
    """Request schema for creating a subtask; the parent comes from the URL."""
    title: str = Field(..., min_length=1, max_length=SUBTASK_TITLE_MAX_LENGTH)
    position: Optional[int] = Field(None, ge=0)


class SubtaskUpdateRequest(PartialUpdateModel):
    """Request schema for updating a subtask."""
    NON_NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"title", "status", "position"})

    title: Optional[str] = Field(None, min_length=1, max_length=SUBTASK_TITLE_MAX_LENGTH)
    status: Optional[SubtaskStatus] = None
    position: Optional[int] = Field(None, ge=0)


class SubtaskReorderRequest(CamelModel):
    """Request schema for drag-and-drop reordering."""
    position: int = Field(..., ge=0)

from datetime import datetime
from typing import ClassVar, FrozenSet, List, Optional
from pydantic import Field, field_validator

from app.constants.constants import HEX_COLOR_PATTERN, TAG_NAME_MAX_LENGTH, Workspace
from app.schemas.baseSchema import CamelModel, PartialUpdateModel
from app.schemas.taskSchema import TaskSummaryResponse


def _dedupe_workspaces(value: Optional[List[Workspace]]) -> Optional[List[Workspace]]:
    if value is None:
        return value
    return list(dict.fromkeys(value))


class TagResponse(CamelModel):
    id: int
    name: str
    color: str
    workspaces: List[Workspace]
    created_at: datetime
    updated_at: datetime


class TaskTagResponse(CamelModel):
    task_id: int
    tag_id: int
    created_at: datetime
    task: TaskSummaryResponse


class TagDetailResponse(TagResponse):
    task_tags: List[TaskTagResponse] = []


class TagCreateRequest(CamelModel):
    """Request schema for creating a tag."""
    name: str = Field(..., min_length=1, max_length=TAG_NAME_MAX_LENGTH)
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)
    workspaces: List[Workspace]

    @field_validator("workspaces")
    @classmethod
    def dedupe_workspaces(cls, value):
        return _dedupe_workspaces(value)


class TagUpdateRequest(PartialUpdateModel):
    """Request schema for updating a tag."""
    NON_NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"name", "color", "workspaces"})

    name: Optional[str] = Field(None, min_length=1, max_length=TAG_NAME_MAX_LENGTH)
    color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    workspaces: Optional[List[Workspace]] = None

    @field_validator("workspaces")
    @classmethod
    def dedupe_workspaces(cls, value):
        return _dedupe_workspaces(value)


class TagFilterRequest(CamelModel):
    workspace: Optional[Workspace] = None

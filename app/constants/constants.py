"""Constants for workspaces, task statuses, subtask statuses and tag colours."""

from enum import Enum


class Workspace(str, Enum):
    """Enumeration of top-level workspaces a task or tag belongs to."""

    WORK = "WORK"
    PERSONAL = "PERSONAL"


class TaskStatus(str, Enum):
    """Enumeration of task board columns."""

    BACKLOG = "BACKLOG"
    TODAY = "TODAY"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class SubtaskStatus(str, Enum):
    """Enumeration of subtask statuses."""

    TODO = "TODO"
    DOING = "DOING"
    DONE = "DONE"


HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"

TASK_TITLE_MAX_LENGTH = 500
SUBTASK_TITLE_MAX_LENGTH = 500
TAG_NAME_MAX_LENGTH = 50

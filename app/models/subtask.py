"""Subtask model: ordered checklist items belonging to a task."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.constants.constants import SUBTASK_TITLE_MAX_LENGTH, SubtaskStatus
from app.models.base import Base, TimestampMixin


class Subtask(Base, TimestampMixin):
    """Model representing a subtask of a task.

    ``completed_at`` is only set while ``status`` is DONE. ``position`` is a
    sort key and may contain gaps or duplicates.
    """

    __tablename__ = "subtasks"
    id = Column(Integer, primary_key=True, autoincrement=True)
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(SUBTASK_TITLE_MAX_LENGTH), nullable=False)
    status = Column(
        SQLEnum(SubtaskStatus, name="subtask_status"),
        nullable=False,
        default=SubtaskStatus.TODO,
        server_default=SubtaskStatus.TODO.value,
    )
    position = Column(Integer, nullable=False, default=0)
    completed_at = Column(DateTime, nullable=True)
    task = relationship("Task", back_populates="subtasks")

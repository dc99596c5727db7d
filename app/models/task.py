"""Task model for the task board."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, false, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.constants.constants import TASK_TITLE_MAX_LENGTH, TaskStatus, Workspace
from app.models.base import Base, TimestampMixin


class Task(Base, TimestampMixin):
    """Model representing a task on the board."""

    __tablename__ = "tasks"
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(TASK_TITLE_MAX_LENGTH), nullable=False)
    description = Column(Text, nullable=True)
    workspace = Column(SQLEnum(Workspace, name="workspace"), nullable=False, index=True)
    channel_id = Column(Integer, ForeignKey("channels.id", ondelete="SET NULL"), nullable=True, index=True)
    status = Column(
        SQLEnum(TaskStatus, name="task_status"),
        nullable=False,
        default=TaskStatus.BACKLOG,
        server_default=TaskStatus.BACKLOG.value,
        index=True,
    )
    due_date = Column(DateTime, nullable=True)
    is_routine = Column(Boolean, nullable=False, default=False, server_default=false())
    channel = relationship("Channel", back_populates="tasks")
    subtasks = relationship(
        "Subtask",
        back_populates="task",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Subtask.position",
    )
    task_tags = relationship(
        "TaskTag",
        back_populates="task",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

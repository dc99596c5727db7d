"""Tag models: tags, the workspaces a tag is offered in, and task-tag links."""

from datetime import datetime
from typing import Iterable, List
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.constants.constants import TAG_NAME_MAX_LENGTH, Workspace
from app.models.base import Base, TimestampMixin


class Tag(Base, TimestampMixin):
    """Model representing a coloured label that can be attached to tasks."""

    __tablename__ = "tags"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(TAG_NAME_MAX_LENGTH), nullable=False, unique=True)
    color = Column(String(7), nullable=False)
    workspace_links = relationship(
        "TagWorkspace",
        back_populates="tag",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="TagWorkspace.workspace",
    )
    task_tags = relationship(
        "TaskTag",
        back_populates="tag",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def workspaces(self) -> List[Workspace]:
        return [link.workspace for link in self.workspace_links]

    def set_workspaces(self, workspaces: Iterable[Workspace]) -> None:
        """Replace the workspace set, keeping rows that are still wanted."""
        wanted = list(dict.fromkeys(Workspace(ws) for ws in workspaces))
        for link in list(self.workspace_links):
            if link.workspace not in wanted:
                self.workspace_links.remove(link)
        present = {link.workspace for link in self.workspace_links}
        for ws in wanted:
            if ws not in present:
                self.workspace_links.append(TagWorkspace(workspace=ws))


class TagWorkspace(Base):
    """Membership of a tag in a workspace."""

    __tablename__ = "tag_workspaces"
    tag_id = Column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True)
    workspace = Column(SQLEnum(Workspace, name="workspace"), primary_key=True, index=True)
    tag = relationship("Tag", back_populates="workspace_links")


class TaskTag(Base):
    """Association between a task and a tag; at most one row per pair."""

    __tablename__ = "task_tags"
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), primary_key=True)
    tag_id = Column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    task = relationship("Task", back_populates="task_tags")
    tag = relationship("Tag", back_populates="task_tags")

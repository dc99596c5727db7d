"""Channel model used to group tasks inside a workspace."""

from sqlalchemy import Column, Integer, String, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.constants.constants import Workspace
from app.models.base import Base, TimestampMixin


class Channel(Base, TimestampMixin):
    """Model representing a channel tasks can optionally belong to."""

    __tablename__ = "channels"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, unique=True)
    workspace = Column(SQLEnum(Workspace, name="workspace"), nullable=False)
    color = Column(String(7), nullable=True)
    tasks = relationship("Task", back_populates="channel", passive_deletes=True)

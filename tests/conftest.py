# tests/conftest.py

import os

# Settings are read at import time, so the environment has to be in place
# before anything under app/ is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["API_KEY"] = "test-api-key"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
import pytest_asyncio

from app.constants.constants import Workspace
from app.core.database import DatabaseSessionManager
from app.models.channel import Channel
from app.schemas.tagSchema import TagCreateRequest
from app.schemas.taskSchema import TaskCreateRequest
from app.services.SubtaskService import SubtaskService
from app.services.TagService import TagService
from app.services.TaskService import TaskService

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_API_KEY = "test-api-key"


@pytest_asyncio.fixture
async def db_manager():
    """A fresh in-memory database with every table created."""
    manager = DatabaseSessionManager(TEST_DATABASE_URL)
    await manager.init()
    yield manager
    await manager.close()


@pytest_asyncio.fixture
async def db(db_manager):
    async with db_manager.get_session() as session:
        yield session


@pytest.fixture()
def task_service(db) -> TaskService:
    return TaskService(db)


@pytest.fixture()
def subtask_service(db) -> SubtaskService:
    return SubtaskService(db)


@pytest.fixture()
def tag_service(db) -> TagService:
    return TagService(db)


@pytest_asyncio.fixture
async def work_channel(db) -> Channel:
    channel = Channel(name="Development", workspace=Workspace.WORK, color="#3B82F6")
    db.add(channel)
    await db.flush()
    return channel


@pytest_asyncio.fixture
async def task(task_service):
    return await task_service.create(TaskCreateRequest(title="Ship release", workspace=Workspace.WORK))


@pytest_asyncio.fixture
async def urgent_tag(tag_service):
    return await tag_service.create(
        TagCreateRequest(name="urgent", color="#F97316", workspaces=[Workspace.WORK, Workspace.PERSONAL])
    )

"""Default tags and channels for a fresh board."""

import logging
from typing import Dict, List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.constants.constants import Workspace
from app.models.channel import Channel
from app.models.tag import Tag

logger = logging.getLogger(__name__)

DEFAULT_TAGS: List[Dict] = [
    {"name": "blocked", "color": "#EF4444", "workspaces": [Workspace.WORK, Workspace.PERSONAL]},
    {"name": "urgent", "color": "#F97316", "workspaces": [Workspace.WORK, Workspace.PERSONAL]},
    {"name": "bug", "color": "#DC2626", "workspaces": [Workspace.WORK]},
    {"name": "feature", "color": "#10B981", "workspaces": [Workspace.WORK]},
    {"name": "enhancement", "color": "#3B82F6", "workspaces": [Workspace.WORK]},
    {"name": "documentation", "color": "#8B5CF6", "workspaces": [Workspace.WORK]},
]

DEFAULT_CHANNELS: List[Dict] = [
    {"name": "Development", "workspace": Workspace.WORK, "color": "#3B82F6"},
    {"name": "Home Projects", "workspace": Workspace.PERSONAL, "color": "#10B981"},
]


async def seed_defaults(db: AsyncSession) -> Dict[str, int]:
    """
    Upsert the default tags and channels by name.

    Running it again only refreshes colours and workspaces.
    """
    created = {"tags": 0, "channels": 0}

    for defaults in DEFAULT_TAGS:
        tag = await db.scalar(select(Tag).where(Tag.name == defaults["name"]))
        if not tag:
            tag = Tag(name=defaults["name"])
            db.add(tag)
            created["tags"] += 1
        tag.color = defaults["color"]
        tag.set_workspaces(defaults["workspaces"])
        logger.info(f"Seeded tag: {defaults['name']} ({defaults['color']})")

    for defaults in DEFAULT_CHANNELS:
        channel = await db.scalar(select(Channel).where(Channel.name == defaults["name"]))
        if not channel:
            channel = Channel(name=defaults["name"])
            db.add(channel)
            created["channels"] += 1
        channel.workspace = defaults["workspace"]
        channel.color = defaults["color"]
        logger.info(f"Seeded channel: {defaults['name']}")

    await db.flush()
    return created

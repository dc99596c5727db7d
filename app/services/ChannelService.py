"""Read-only channel lookups."""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.constants.constants import Workspace
from app.core.exceptions import NotFoundError
from app.models.channel import Channel


class ChannelService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self, workspace: Optional[Workspace] = None) -> List[Channel]:
        query = select(Channel)
        if workspace:
            query = query.where(Channel.workspace == workspace)
        result = await self.db.execute(query.order_by(Channel.name.asc()))
        return list(result.scalars().all())

    async def find_one(self, channel_id: int) -> Channel:
        channel = await self.db.get(Channel, channel_id)
        if not channel:
            raise NotFoundError(f"Channel with ID {channel_id} not found")
        return channel

"""Channel lookup router."""

from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.constants.constants import Workspace
from app.core.database import aget_db
from app.schemas.channelSchema import ChannelResponse
from app.services.ChannelService import ChannelService

router = APIRouter(prefix="/channels", tags=["channels"])


@router.get("", response_model=List[ChannelResponse])
async def list_channels(
    workspace: Optional[Workspace] = None,
    db: AsyncSession = Depends(aget_db)
):
    return await ChannelService(db).find_all(workspace)


@router.get("/{channel_id}", response_model=ChannelResponse)
async def get_channel(
    channel_id: int,
    db: AsyncSession = Depends(aget_db)
):
    return await ChannelService(db).find_one(channel_id)

from datetime import datetime
from typing import Optional

from app.constants.constants import Workspace
from app.schemas.baseSchema import CamelModel


class ChannelResponse(CamelModel):
    id: int
    name: str
    workspace: Workspace
    color: Optional[str] = None
    created_at: datetime

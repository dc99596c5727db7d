"""Public health check used by monitoring and load balancers."""

import logging
import time
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import aget_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health Check"])

STARTED_AT = time.monotonic()


@router.get("")
async def health_check(db: AsyncSession = Depends(aget_db)):
    response = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - STARTED_AT, 3),
    }
    try:
        await db.execute(text("SELECT 1"))
        response["database"] = "connected"
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        response["status"] = "degraded"
        response["database"] = "disconnected"
    return response

"""
Seed the database with the default tags and channels.

Usage:
    python -m scripts.seed_database
"""
import asyncio
import logging
import sys

from app.core.config import settings
from app.core.database import DatabaseSessionManager
from app.utils.seed import seed_defaults

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main() -> int:
    session_manager = DatabaseSessionManager(settings.DATABASE_URL)
    await session_manager.init()
    try:
        logger.info("Starting database seeding...")
        async with session_manager.get_session() as session:
            created = await seed_defaults(session)
        logger.info(f"Seeding completed: {created['tags']} new tags, {created['channels']} new channels")
        return 0
    except Exception as e:
        logger.error(f"Seeding failed: {e}")
        return 1
    finally:
        await session_manager.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

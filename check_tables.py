from app.core.config import settings
from app.core.database import DatabaseSessionManager
import asyncio

async def list_tables():
    # Initialize the session manager first
    session_manager = DatabaseSessionManager(settings.DATABASE_URL)
    await session_manager.init()

    try:
        tables = await session_manager.table_names()
        print("✅ Tables in database:", tables)
    finally:
        await session_manager.close()

asyncio.run(list_tables())

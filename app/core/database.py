"""
Async Database Manager for the task board with SQLAlchemy
- Automatic database creation if missing (PostgreSQL)
- Table initialization for every registered model
- SQLite support (foreign keys enabled) for local runs and tests
"""
import logging
from importlib import import_module
from contextlib import asynccontextmanager
from typing import AsyncGenerator, List, Optional
from sqlalchemy import event, inspect, text
import sqlalchemy
from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
    AsyncEngine
)
from sqlalchemy.pool import StaticPool
from fastapi import Request
import asyncpg
from app.core.config import settings
from app.models.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with auto-creation and setup."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker] = None

    @property
    def is_sqlite(self) -> bool:
        return make_url(self.database_url).get_backend_name() == "sqlite"

    async def init(self):
        """Initialize database connection with auto-creation fallback"""
        try:
            self.engine = self._create_engine()

            try:
                async with self.engine.begin() as conn:
                    await self._setup_database(conn)
            except (asyncpg.exceptions.InvalidCatalogNameError, sqlalchemy.exc.DBAPIError) as e:
                if not self._is_missing_database(e) or not await self._create_database():
                    raise
                await self._setup_database_after_creation()

            self.session_factory = async_sessionmaker(
                bind=self.engine,
                expire_on_commit=False,
                autoflush=False
            )

        except Exception as e:
            logger.error(f"❌ Database initialization failed: {e}")
            raise

    def _create_engine(self) -> AsyncEngine:
        if self.is_sqlite:
            engine = create_async_engine(
                self.database_url,
                echo=self.echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
            return engine

        return create_async_engine(
            self.database_url,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=30,
            pool_recycle=300,
            pool_pre_ping=True,
            echo=self.echo,
        )

    @staticmethod
    def _is_missing_database(error: BaseException) -> bool:
        """Walk the exception chain looking for asyncpg's missing-catalog error."""
        current: Optional[BaseException] = error
        while current is not None:
            if isinstance(current, asyncpg.exceptions.InvalidCatalogNameError):
                return True
            current = getattr(current, "orig", None) or current.__cause__
        return False

    async def _setup_database(self, conn):
        """Initialize database schema"""
        try:
            await conn.execute(text("SELECT 1"))
            for model in settings.DB_MODELS:
                import_module(model)

            logger.info(f"📝 Models registered: {list(Base.metadata.tables.keys())}")
            await conn.run_sync(Base.metadata.create_all)
            created_tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
            logger.info(f"✅ Tables ready: {created_tables}")

        except Exception as e:
            logger.error(f"❌ Database setup failed: {e}")
            raise

    async def _setup_database_after_creation(self):
        """Reinitialize after database creation"""
        logger.info("🔄 Setting up newly created database...")
        await self.engine.dispose()
        self.engine = self._create_engine()
        async with self.engine.begin() as conn:
            await self._setup_database(conn)

    async def table_names(self) -> List[str]:
        """List the tables currently present in the database."""
        if not self.engine:
            raise RuntimeError("DatabaseSessionManager not initialized")
        async with self.engine.connect() as conn:
            return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Context manager for safe session handling"""
        if not self.session_factory:
            raise RuntimeError("DatabaseSessionManager not initialized")
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def _create_database(self) -> bool:
        """Create the database if it does not exist"""
        try:
            db_url = make_url(self.database_url)
            db_name = db_url.database

            logger.info(f"Creating missing database '{db_name}'")

            # Connect to the default database (usually 'postgres')
            default_url = db_url.set(database="postgres")
            engine = create_async_engine(default_url, isolation_level="AUTOCOMMIT")
            async with engine.connect() as conn:
                await conn.execute(text(f'CREATE DATABASE "{db_name}"'))
            await engine.dispose()
            logger.info(f"✅ Database '{db_name}' created successfully.")
            return True
        except (asyncpg.exceptions.PostgresError, sqlalchemy.exc.SQLAlchemyError) as e:
            logger.error(f"❌ Failed to create database: {e}")
            return False

    async def close(self):
        """Cleanup connection pool"""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


async def aget_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions
    Usage:
    @router.get("/")
    async def endpoint(db: AsyncSession = Depends(aget_db)):
        ...
    """
    session_manager: DatabaseSessionManager = request.app.state.db
    async with session_manager.get_session() as session:
        yield session

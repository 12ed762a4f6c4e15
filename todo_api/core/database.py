"""
Database connection and schema bootstrap
Uses SQLAlchemy async engine for PostgreSQL
Reference: https://docs.sqlalchemy.org/en/20/orm/extensions/asyncio.html
"""
import logging

from sqlalchemy import func, select, text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from todo_api.core.config import Settings
from todo_api.models import Base, Todo

logger = logging.getLogger(__name__)

# Demo row inserted when startup finds the table empty
SEED_TASK = "Learn Go"


class Database:
    """
    Owns the connection pool shared by every listener

    Built once at startup and handed to the application factory, so request
    handlers reach the pool through app.state instead of a module global.
    """

    def __init__(self, url: str | URL, **engine_options):
        # Reference: https://docs.sqlalchemy.org/en/20/core/engines.html#sqlalchemy.create_engine
        self.engine = create_async_engine(url, echo=False, **engine_options)

        # Reference: https://docs.sqlalchemy.org/en/20/orm/extensions/asyncio.html#session-basics
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Keep ids readable after commit
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Create the pooled engine described by settings"""
        return cls(
            settings.database_url(),
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_pre_ping=True,  # Replace connections the server has dropped
        )

    def session(self) -> AsyncSession:
        """New session; use as an async context manager so it is always closed"""
        return self.session_maker()

    async def ping(self) -> None:
        """
        Round-trip liveness probe

        Raises:
            SQLAlchemyError / OSError: the database cannot be reached
        """
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def init_schema(self) -> None:
        """
        Create the todos table and its index if they are missing

        Safe to run on every startup: create_all checks for existing
        objects before issuing CREATE statements.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)

    async def seed(self) -> bool:
        """
        Insert the demo todo if the table is empty

        Failures are logged and swallowed; a missing demo row never stops startup.

        Returns:
            True if a row was inserted
        """
        try:
            async with self.session() as session, session.begin():
                count = await session.scalar(select(func.count()).select_from(Todo))
                if count:
                    return False
                session.add(Todo(task=SEED_TASK, completed=False))
        except SQLAlchemyError as e:
            logger.error(f"Failed to insert sample todo: {e}")
            return False

        logger.info("Added sample todo")
        return True

    async def dispose(self) -> None:
        """Close every pooled connection"""
        await self.engine.dispose()
        logger.info("Database connections closed")

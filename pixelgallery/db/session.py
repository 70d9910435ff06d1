

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from pixelgallery.db.base import Base


logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on FK enforcement so ON DELETE CASCADE works on SQLite."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Storage handle owning the async engine and session factory.

    Constructed once by the application factory, opened at startup and
    disposed at shutdown. Request handlers receive sessions from it through
    the get_db dependency.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.url = database_url
        self.engine = create_async_engine(database_url, echo=echo)

        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    async def create_all(self) -> None:
        """
        Create all tables defined in the models if they don't exist.

        Should be called during application startup.
        """
        # Register every model on Base.metadata before creating tables
        from pixelgallery.models import art, friendship, gallery, gallery_art, user  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Database schema ready ({self.engine.dialect.name})")

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()

    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yield an async database session and ensure it's closed after use.

        Yields:
            AsyncSession: Database session for the request lifespan.
        """
        async with self.session_factory() as session:
            try:
                yield session
            finally:
                await session.close()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get async database session.

    Resolves the Database attached to the running application.

    Yields:
        AsyncSession: Database session for the request lifespan.
    """
    database: Database = request.app.state.database
    async for session in database.session():
        yield session

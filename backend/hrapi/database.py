"""
HR API Backend — Database Session Management
==============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI session dependency.
How:   `Database` owns one async engine (connection pool) and a session
       factory. The app factory constructs it, stores it on `app.state`, and
       the lifespan handler disposes it on shutdown. Route dependencies reach
       it through the request, so there is no module-level engine.
Who:   Used by the document-store dependency and by tests.

Connection Pooling:
    PostgreSQL (asyncpg):  pool_size / max_overflow / pre_ping from settings,
                           connections recycled hourly.
    SQLite (aiosqlite):    in-memory URLs get a StaticPool so every session
                           shares the one connection holding the data.
"""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from hrapi.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for migrations.
    """
    pass


def _engine_options(database_url: str, settings: Settings) -> dict:
    """Builds create_async_engine keyword arguments for the given backend."""
    url = make_url(database_url)
    options = {"echo": settings.log_level == "DEBUG"}

    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
            options["connect_args"] = {"check_same_thread": False}
        return options

    options.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
    )
    return options


class Database:
    """
    Handle to the document database: engine plus session factory.

    Lifecycle:
        1. Constructed once by create_app() (no connection is opened yet)
        2. Sessions are opened per request through get_db_session()
        3. dispose() closes every pooled connection at shutdown
    """

    def __init__(self, settings: Settings):
        self.url = settings.database_url
        self.engine: AsyncEngine = create_async_engine(
            self.url, **_engine_options(self.url, settings)
        )
        # expire_on_commit=False: rows stay readable after the request commits
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        """Creates every table registered on Base (development and tests)."""
        # Registers the ORM models on Base.metadata
        from hrapi.models import document  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def dispose(self) -> None:
        """Gracefully closes all connections in the pool."""
        await self.engine.dispose()


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the app's Database
        2. Yields it to the dependents (document store, services, handler)
        3. On success: commits the transaction. Dependents declare it with
           scope="function", so this runs before the response starts
        4. On error: rolls back and re-raises for the global error handler
        5. Always: closes the session (returns the connection to the pool)
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

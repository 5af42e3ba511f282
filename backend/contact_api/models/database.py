"""Database configuration and session management.

This module provides:
- Async SQLAlchemy engine construction from settings
- Session factory for service-level units of work
- Database initialization and reset utilities

Nothing here is created at import time: the application builds its engine
in the lifespan handler and disposes it on shutdown.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from contact_api.config.settings import Settings
from contact_api.config.constants import DB_POOL_SIZE, DB_POOL_MAX_OVERFLOW, ROW_ID_MIN, ROW_ID_MAX

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database URL.

    PostgreSQL (asyncpg) gets a pre-pinged connection pool so dropped
    connections are replaced transparently. An in-memory SQLite database
    must share a single connection, otherwise every checkout would see
    an empty database.
    """
    url = settings.database_url

    if url.startswith("sqlite"):
        if ":memory:" in url:
            return create_async_engine(url, echo=settings.DB_ECHO, poolclass=StaticPool)
        return create_async_engine(url, echo=settings.DB_ECHO)

    return create_async_engine(
        url,
        echo=settings.DB_ECHO,
        pool_pre_ping=True,
        pool_size=DB_POOL_SIZE,
        max_overflow=DB_POOL_MAX_OVERFLOW
    )


def id_in_range(value: int) -> bool:
    """True if the id can exist in an Integer key column."""
    return ROW_ID_MIN <= value <= ROW_ID_MAX


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, expire_on_commit=False)


async def init_db(engine: AsyncEngine):
    """Initialize database by creating all tables.

    Creates tables defined in SQLAlchemy models if they don't exist.
    Safe to call multiple times (idempotent operation).
    """
    # Import models so they register on Base.metadata
    from contact_api.models import contact, message, user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized successfully")


async def reset_db(engine: AsyncEngine):
    """Drop all database tables.

    WARNING: This permanently deletes all data. Use only in development
    or when intentionally resetting the database schema.
    """
    from contact_api.models import contact, message, user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("Database tables dropped - all data removed")

"""
Async engine and request-scoped sessions.

Dependencies: sqlalchemy, scm_backend.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from scm_backend.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Process-wide engine; disposed by the API lifespan on shutdown.

    Pool sizing only applies to server databases; SQLite gets the
    dialect's default pool.
    """
    db_config = get_settings().database
    pool_options = (
        {}
        if db_config.is_sqlite
        else {
            "pool_size": db_config.pool_size,
            "max_overflow": db_config.max_overflow,
            "pool_timeout": db_config.pool_timeout,
            "pool_pre_ping": True,
        }
    )
    return create_async_engine(db_config.async_database_url, echo=db_config.echo_sql, **pool_options)


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: services return ORM rows after committing
    return async_sessionmaker(bind=get_async_engine(), autoflush=False, expire_on_commit=False)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one session per request.

    Services commit their own unit of work; anything left uncommitted when
    the request fails is rolled back.
    """
    async with get_async_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def create_tables() -> None:
    """Create any missing tables. Existing tables are left untouched."""
    from scm_backend.boundary.db.base import Base
    from scm_backend.boundary.db import models  # noqa: F401

    async with get_async_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

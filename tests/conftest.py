"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, user factory, notifier mock
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from scm_backend.boundary.db import Base

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def make_user(test_async_db):
    """
    Factory creating committed users in the test database.

    Returns:
        Callable: async (**overrides) -> UserModel
    """
    from scm_backend.boundary.db.CRUD import user_crud

    async def _make_user(**overrides):
        values = {
            "email": f"user-{uuid.uuid4().hex[:8]}@example.com",
            "name": "Test User",
            "integrations": {},
        }
        values.update(overrides)
        user = await user_crud.create(test_async_db, **values)
        await test_async_db.commit()
        return user

    return _make_user


@pytest.fixture
def mock_notifier() -> AsyncMock:
    """
    Notifier double recording create_notification calls.

    Returns:
        AsyncMock: Object with an async create_notification method
    """
    notifier = AsyncMock()
    notifier.create_notification = AsyncMock(return_value=None)
    return notifier

"""
Generic async CRUD for the ORM models.

Every entity synced from a vendor is written through `upsert`, keyed on
the vendor's natural identifier (order number, SKU, device id, ...), so
re-running a sync updates rows instead of duplicating them.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Model-agnostic CRUD. Methods flush but never commit; the calling
    service owns the transaction.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """Insert a row and return it with server/default values loaded."""
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_all(self, session: AsyncSession, limit: int | None = None) -> Sequence[ModelT]:
        """All rows, oldest first."""
        stmt = select(self.model).order_by(self.model.created_at)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def find_one(self, session: AsyncSession, **filters: Any) -> ModelT | None:
        """First row whose columns equal every filter value, or None."""
        stmt = select(self.model).filter_by(**filters).limit(1)
        result = await session.execute(stmt)
        return result.scalars().first()

    async def find_many(
        self,
        session: AsyncSession,
        limit: int | None = None,
        **filters: Any,
    ) -> Sequence[ModelT]:
        stmt = select(self.model).filter_by(**filters).order_by(self.model.created_at)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def upsert(
        self,
        session: AsyncSession,
        lookup: dict[str, Any],
        values: dict[str, Any],
    ) -> tuple[ModelT, bool]:
        """
        Create or update the row identified by a natural key.

        Running the same upsert twice leaves exactly one row whose columns
        equal the last values written.

        Args:
            session: Async database session
            lookup: Natural key columns and values (e.g. {"sku": "A-1"})
            values: Full set of mapped column values

        Returns:
            Tuple of (instance, created) where created is True for inserts
        """
        existing = await self.find_one(session, **lookup)
        if existing is None:
            return await self.create(session, **{**values, **lookup}), True

        for key, value in values.items():
            setattr(existing, key, value)
        await session.flush()
        return existing, False

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """
        Returns:
            True if a row was deleted, False if none matched
        """
        result = await session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        result = await session.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None

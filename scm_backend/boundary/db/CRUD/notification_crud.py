"""
Notification CRUD operations.

Dependencies: sqlalchemy, scm_backend.boundary.db.models
System role: Notification persistence and read-state bookkeeping
"""

from typing import Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.boundary.db.CRUD.base_crud import BaseCRUD
from scm_backend.boundary.db.models.notification_model import NotificationModel


class NotificationCRUD(BaseCRUD[NotificationModel]):
    """
    CRUD operations for NotificationModel.

    Extends BaseCRUD with per-user listing and read-state queries.
    """

    def __init__(self) -> None:
        """Initialize NotificationCRUD with NotificationModel."""
        super().__init__(NotificationModel)

    async def get_by_user(
        self,
        session: AsyncSession,
        user_id: str,
        unread_only: bool = False,
        limit: int | None = None,
    ) -> Sequence[NotificationModel]:
        """
        Retrieve a user's notifications, newest first.

        Args:
            session: Async database session
            user_id: Recipient user id
            unread_only: Restrict to unread notifications
            limit: Maximum number of notifications to return

        Returns:
            Sequence of NotificationModel
        """
        stmt = select(NotificationModel).where(NotificationModel.user_id == user_id)
        if unread_only:
            stmt = stmt.where(NotificationModel.read.is_(False))
        stmt = stmt.order_by(NotificationModel.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_unread(self, session: AsyncSession, user_id: str) -> int:
        """
        Count unread notifications for a user.

        Args:
            session: Async database session
            user_id: Recipient user id

        Returns:
            int: Number of unread notifications
        """
        stmt = (
            select(func.count())
            .select_from(NotificationModel)
            .where(NotificationModel.user_id == user_id, NotificationModel.read.is_(False))
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def mark_all_read(self, session: AsyncSession, user_id: str) -> int:
        """
        Mark every unread notification of a user as read.

        Args:
            session: Async database session
            user_id: Recipient user id

        Returns:
            int: Number of notifications updated
        """
        stmt = (
            update(NotificationModel)
            .where(NotificationModel.user_id == user_id, NotificationModel.read.is_(False))
            .values(read=True)
        )
        result = await session.execute(stmt)
        return result.rowcount


notification_crud = NotificationCRUD()

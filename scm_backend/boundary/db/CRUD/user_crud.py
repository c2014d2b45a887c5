"""
User CRUD operations.

Dependencies: sqlalchemy, scm_backend.boundary.db.models
System role: User lookup and integration settings persistence
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.boundary.db.CRUD.base_crud import BaseCRUD
from scm_backend.boundary.db.models.user_model import UserModel


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel."""

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        """
        Retrieve user by login email.

        Args:
            session: Async database session
            email: Email address

        Returns:
            UserModel if found, None otherwise
        """
        stmt = select(UserModel).where(UserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def set_integration(
        self,
        session: AsyncSession,
        user_id: UUID,
        category: str,
        settings: dict,
    ) -> UserModel | None:
        """
        Replace the stored settings for one integration category.

        A new dict is assigned so the JSON column change is tracked.

        Args:
            session: Async database session
            user_id: User UUID
            category: Integration category key
            settings: {"enabled", "service", "api_key", "store_url"?}

        Returns:
            Updated UserModel if found, None otherwise
        """
        user = await self.get_by_id(session, user_id)
        if user is None:
            return None
        integrations = dict(user.integrations or {})
        integrations[category] = dict(settings)
        user.integrations = integrations
        await session.flush()
        return user


    async def find_with_active_integration(
        self,
        session: AsyncSession,
        category: str,
        service: str,
    ) -> UserModel | None:
        """
        Oldest user with an enabled integration for the given service.

        Inbound vendor webhooks carry no user reference, so the receiving
        account is resolved from the stored integration settings.

        Args:
            session: Async database session
            category: Integration category key (erp_crm, iot, ...)
            service: Vendor service identifier (sap, iot_monitoring, ...)

        Returns:
            UserModel if one matches, None otherwise
        """
        stmt = (
            select(UserModel)
            .where(
                UserModel.integrations[(category, "service")].as_string() == service,
                UserModel.integrations[(category, "enabled")].as_boolean().is_(True),
            )
            .order_by(UserModel.created_at)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalars().first()


user_crud = UserCRUD()

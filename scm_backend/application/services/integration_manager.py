"""
Integration manager.

Per-user orchestration of third-party integrations: settings CRUD,
connect/disconnect, and syncing every active integration. A failure in
one integration is recorded in its result and never stops the others.

Dependencies: scm_backend.core.integration, scm_backend.boundary.db.CRUD
System role: Integration use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.application.services.notification_service import NotificationService
from scm_backend.boundary.db.CRUD import user_crud
from scm_backend.boundary.db.models import NotificationType, UserModel
from scm_backend.core.exceptions import NotFoundError, ValidationError
from scm_backend.core.integration import (
    IntegrationCategory,
    IntegrationServiceFactory,
    Notifier,
    SyncResult,
)
from scm_backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

CATEGORIES = [category.value for category in IntegrationCategory]


def validate_category(category: str) -> str:
    """
    Raises:
        ValidationError: category is not a known integration category
    """
    if category not in CATEGORIES:
        raise ValidationError(
            "Invalid integration category",
            field="category",
            details={"code": "INVALID_CATEGORY", "category": category},
        )
    return category


class IntegrationManager:
    """Integration orchestrator for a single user."""

    def __init__(
        self,
        db: AsyncSession,
        user_id: str | UUID,
        notifier: Notifier | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize integration manager.

        Args:
            db: Async SQLAlchemy session
            user_id: Owner of the integrations
            notifier: Notification sink (NotificationService on db by default)
            http_client: Optional shared httpx client handed to vendor clients
        """
        self.db = db
        self.user_id = str(user_id)
        self.notifier = notifier or NotificationService(db)
        self.http_client = http_client

    async def _get_user(self) -> UserModel:
        try:
            user_uuid = UUID(self.user_id)
        except ValueError:
            raise NotFoundError("user", self.user_id)
        user = await user_crud.get_by_id(self.db, user_uuid)
        if user is None:
            raise NotFoundError("user", self.user_id)
        return user

    async def _store(self, category: str, settings: dict[str, Any]) -> None:
        await user_crud.set_integration(self.db, UUID(self.user_id), category, settings)
        await self.db.commit()

    def _create_service(
        self,
        category: str,
        service: str,
        api_key: str,
        store_url: str | None = None,
    ):
        return IntegrationServiceFactory.create_service(
            category,
            service,
            api_key,
            self.user_id,
            store_url,
            db=self.db,
            notifier=self.notifier,
            http_client=self.http_client,
        )

    async def get_active_integrations(self) -> dict[str, list[str]]:
        """
        Enabled services per category.

        Returns:
            dict: Every category key, each mapped to its enabled services

        Raises:
            NotFoundError: User does not exist
        """
        user = await self._get_user()
        result: dict[str, list[str]] = {category: [] for category in CATEGORIES}

        for category, integration in (user.integrations or {}).items():
            if category not in result or not isinstance(integration, dict):
                continue
            if integration.get("enabled") and integration.get("service"):
                result[category].append(integration["service"])

        return result

    async def sync_all_integrations(self) -> dict[str, SyncResult]:
        """
        Sync every active integration in turn.

        Returns:
            dict: SyncResult per "category/service"
        """
        results: dict[str, SyncResult] = {}
        active = await self.get_active_integrations()
        user = await self._get_user()
        stored = dict(user.integrations or {})

        for category, services in active.items():
            for service in services:
                key = f"{category}/{service}"
                try:
                    integration = stored.get(category) or {}
                    if not integration.get("enabled"):
                        continue

                    adapter = self._create_service(
                        category,
                        service,
                        integration.get("api_key") or "",
                        integration.get("store_url"),
                    )
                    sync_result = await adapter.sync()
                    results[key] = sync_result

                    await self.notifier.create_notification(
                        self.user_id,
                        NotificationType.INTEGRATION_SYNC.value,
                        f"{service.upper()} Integration Sync",
                        (
                            f"Successfully synced {service} data."
                            if sync_result.success
                            else f"Failed to sync {service} data."
                        ),
                        {
                            "category": category,
                            "service": service,
                            "success": sync_result.success,
                            "syncedEntities": sync_result.synced_entities,
                        },
                    )
                except Exception as e:
                    logger.error(
                        "Integration sync failed",
                        extra={"user_id": self.user_id, "integration": key, "error": str(e)},
                    )
                    results[key] = SyncResult(
                        success=False,
                        message=f"Error: {e}",
                        errors=[str(e)],
                    )

        logger.info(
            "Integration sync finished",
            extra={"user_id": self.user_id, "integrations": len(results)},
        )
        return results

    async def connect_integration(
        self,
        category: str,
        service: str,
        api_key: str,
        store_url: str | None = None,
    ) -> bool:
        """
        Verify credentials with the vendor and enable the integration.

        Returns:
            bool: True when the vendor accepted the connection
        """
        try:
            adapter = self._create_service(category, service, api_key, store_url)
            connected = await adapter.connect()

            if connected:
                settings: dict[str, Any] = {
                    "service": service,
                    "enabled": True,
                    "api_key": api_key,
                }
                if store_url:
                    settings["store_url"] = store_url
                await self._store(category, settings)

                await self.notifier.create_notification(
                    self.user_id,
                    NotificationType.INTEGRATION_STATUS.value,
                    f"{service.upper()} Integration Connected",
                    f"Successfully connected to {service}.",
                    {"category": category, "service": service},
                )

            return connected
        except Exception as e:
            logger.error(
                "Integration connect failed",
                extra={"user_id": self.user_id, "integration": f"{category}/{service}", "error": str(e)},
            )
            await self.notifier.create_notification(
                self.user_id,
                NotificationType.INTEGRATION_STATUS.value,
                f"{service.upper()} Integration Failed",
                f"Failed to connect to {service}: {e}",
                {"category": category, "service": service, "error": str(e)},
            )
            return False

    async def disconnect_integration(self, category: str, service: str) -> bool:
        """
        Disable an enabled integration, keeping its stored credentials.

        Returns:
            bool: False when nothing matching is enabled or the call failed
        """
        try:
            user = await self._get_user()
            integration = (user.integrations or {}).get(category)

            if (
                not integration
                or not integration.get("enabled")
                or integration.get("service") != service
            ):
                return False

            adapter = self._create_service(
                category,
                service,
                integration.get("api_key") or "",
                integration.get("store_url"),
            )
            disconnected = await adapter.disconnect()

            if disconnected:
                settings: dict[str, Any] = {
                    "service": service,
                    "enabled": False,
                    "api_key": integration.get("api_key"),
                }
                if integration.get("store_url"):
                    settings["store_url"] = integration["store_url"]
                await self._store(category, settings)

                await self.notifier.create_notification(
                    self.user_id,
                    NotificationType.INTEGRATION_STATUS.value,
                    f"{service.upper()} Integration Disconnected",
                    f"Successfully disconnected from {service}.",
                    {"category": category, "service": service},
                )

            return disconnected
        except Exception as e:
            logger.error(
                "Integration disconnect failed",
                extra={"user_id": self.user_id, "integration": f"{category}/{service}", "error": str(e)},
            )
            return False

    async def get_integration(self, category: str) -> dict[str, Any]:
        """
        Stored settings for a category, defaulting to a disabled entry.

        Raises:
            ValidationError: Unknown category
            NotFoundError: User does not exist
        """
        validate_category(category)
        user = await self._get_user()
        return dict((user.integrations or {}).get(category) or {"enabled": False, "service": None})

    async def update_integration(
        self,
        category: str,
        service: str,
        enabled: bool = True,
        api_key: str | None = None,
        store_url: str | None = None,
    ) -> dict[str, Any]:
        """
        Replace a category's settings.

        The store URL is only kept for e-commerce integrations.

        Raises:
            ValidationError: Unknown category or missing service
            NotFoundError: User does not exist
        """
        validate_category(category)
        if not service:
            raise ValidationError(
                "Service name is required",
                field="service",
                details={"code": "INVALID_INPUT"},
            )
        await self._get_user()

        settings: dict[str, Any] = {
            "enabled": enabled,
            "service": service,
            "api_key": api_key or None,
        }
        if category == IntegrationCategory.ECOMMERCE.value:
            settings["store_url"] = store_url or None
        await self._store(category, settings)
        log_with_context(
            logger, logging.INFO, "Integration settings updated", category=category, settings=settings
        )

        await self.notifier.create_notification(
            self.user_id,
            NotificationType.INTEGRATION_STATUS.value,
            f"{category.upper()} Integration Updated",
            f"Your {category} integration has been {'enabled' if enabled else 'disabled'}.",
            {"category": category, "service": service, "enabled": enabled},
        )
        return settings

"""
Integration service factory.

Maps (category, service) pairs to adapter builders. Builders are kept in
a registry so additional vendors can be plugged in with register().

Dependencies: httpx, scm_backend.configs, scm_backend.boundary.vendors
System role: Adapter construction for the integration manager
"""

import logging
from collections.abc import Callable
from typing import Any

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.boundary.vendors import (
    IoTApiClient,
    PowerBiApiClient,
    SapApiClient,
    ShopifyApiClient,
)
from scm_backend.configs import get_settings
from scm_backend.configs.integrations import IntegrationSettings
from scm_backend.core.exceptions import UnsupportedIntegrationError
from scm_backend.core.integration.base import IntegrationService, Notifier
from scm_backend.core.integration.services import (
    IoTIntegrationService,
    PowerBiIntegrationService,
    SapIntegrationService,
    ShopifyIntegrationService,
)

logger = logging.getLogger(__name__)

ServiceBuilder = Callable[..., IntegrationService]


class IntegrationServiceFactory:
    """Registry-backed adapter factory."""

    _registry: dict[tuple[str, str], ServiceBuilder] = {}

    @classmethod
    def register(cls, category: str, service: str) -> Callable[[ServiceBuilder], ServiceBuilder]:
        """
        Decorator registering a builder for a category/service pair.

        The builder receives api_key, user_id, store_url, db, notifier,
        http_client and settings as keyword arguments.
        """

        def decorator(builder: ServiceBuilder) -> ServiceBuilder:
            cls._registry[(category, service)] = builder
            return builder

        return decorator

    @classmethod
    def supported(cls) -> list[tuple[str, str]]:
        return sorted(cls._registry)

    @classmethod
    def create_service(
        cls,
        category: str,
        service: str,
        api_key: str,
        user_id: str,
        store_url: str | None = None,
        *,
        db: AsyncSession,
        notifier: Notifier,
        http_client: httpx.AsyncClient | None = None,
    ) -> IntegrationService:
        """
        Build the adapter for a category/service pair.

        Raises:
            UnsupportedIntegrationError: No builder registered for the pair
        """
        builder = cls._registry.get((category, service))
        if builder is None:
            logger.warning(f"{__name__}:create_service - Unsupported integration: {category}/{service}")
            raise UnsupportedIntegrationError(category, service)

        return builder(
            api_key=api_key,
            user_id=str(user_id),
            store_url=store_url,
            db=db,
            notifier=notifier,
            http_client=http_client,
            settings=get_settings().integrations,
        )


def _client_kwargs(settings: IntegrationSettings, http_client: httpx.AsyncClient | None) -> dict[str, Any]:
    return {
        "timeout": settings.request_timeout,
        "max_retries": settings.max_retries,
        "http_client": http_client,
    }


@IntegrationServiceFactory.register("erp_crm", "sap")
def _build_sap(*, api_key, user_id, db, notifier, http_client, settings, **_) -> IntegrationService:
    client = SapApiClient(api_key, settings.sap_base_url, **_client_kwargs(settings, http_client))
    return SapIntegrationService(client, user_id, db, notifier)


@IntegrationServiceFactory.register("bi_tools", "power_bi")
def _build_power_bi(*, api_key, user_id, db, notifier, http_client, settings, **_) -> IntegrationService:
    client = PowerBiApiClient(
        api_key, settings.power_bi_base_url, **_client_kwargs(settings, http_client)
    )
    return PowerBiIntegrationService(client, user_id, db, notifier)


@IntegrationServiceFactory.register("iot", "iot_monitoring")
def _build_iot(*, api_key, user_id, db, notifier, http_client, settings, **_) -> IntegrationService:
    client = IoTApiClient(api_key, settings.iot_base_url, **_client_kwargs(settings, http_client))
    return IoTIntegrationService(client, user_id, db, notifier)


@IntegrationServiceFactory.register("ecommerce", "shopify")
def _build_shopify(
    *, api_key, user_id, store_url, db, notifier, http_client, settings, **_
) -> IntegrationService:
    client = ShopifyApiClient(
        api_key,
        store_url=store_url,
        api_version=settings.shopify_api_version,
        **_client_kwargs(settings, http_client),
    )
    return ShopifyIntegrationService(
        client, user_id, db, notifier, order_limit=settings.shopify_order_limit
    )

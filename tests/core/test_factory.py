"""
Test suite for IntegrationServiceFactory.

System role: Verification of adapter construction per category/service
"""

from unittest.mock import AsyncMock

import pytest

from scm_backend.boundary.vendors import ShopifyApiClient
from scm_backend.core.exceptions import UnsupportedIntegrationError
from scm_backend.core.integration import IntegrationServiceFactory
from scm_backend.core.integration.services import (
    IoTIntegrationService,
    PowerBiIntegrationService,
    SapIntegrationService,
    ShopifyIntegrationService,
)


class TestIntegrationServiceFactory:
    """Test suite for create_service()."""

    @pytest.mark.parametrize(
        "category,service,expected",
        [
            ("erp_crm", "sap", SapIntegrationService),
            ("bi_tools", "power_bi", PowerBiIntegrationService),
            ("iot", "iot_monitoring", IoTIntegrationService),
            ("ecommerce", "shopify", ShopifyIntegrationService),
        ],
    )
    def test_create_service_should_build_registered_adapter(self, category, service, expected) -> None:
        # Act
        adapter = IntegrationServiceFactory.create_service(
            category, service, "key", "user-1", "shop.myshopify.com",
            db=AsyncMock(), notifier=AsyncMock(),
        )

        # Assert
        assert isinstance(adapter, expected)
        assert adapter.user_id == "user-1"
        assert adapter.client.api_key == "key"

    def test_shopify_adapter_should_use_store_url_and_settings(self) -> None:
        adapter = IntegrationServiceFactory.create_service(
            "ecommerce", "shopify", "key", "user-1", "shop.myshopify.com",
            db=AsyncMock(), notifier=AsyncMock(),
        )

        assert isinstance(adapter.client, ShopifyApiClient)
        assert adapter.client.base_url == "https://shop.myshopify.com/admin/api/2023-07"
        assert adapter.order_limit == 100

    def test_unknown_pair_should_raise(self) -> None:
        with pytest.raises(UnsupportedIntegrationError, match="Unsupported integration: iot/sap"):
            IntegrationServiceFactory.create_service(
                "iot", "sap", "key", "user-1", db=AsyncMock(), notifier=AsyncMock()
            )

    def test_supported_lists_registered_pairs(self) -> None:
        assert ("erp_crm", "sap") in IntegrationServiceFactory.supported()
        assert ("ecommerce", "shopify") in IntegrationServiceFactory.supported()

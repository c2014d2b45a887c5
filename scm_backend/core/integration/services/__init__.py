"""Vendor integration adapters."""

from scm_backend.core.integration.services.iot_service import IoTIntegrationService
from scm_backend.core.integration.services.power_bi_service import PowerBiIntegrationService
from scm_backend.core.integration.services.sap_service import SapIntegrationService
from scm_backend.core.integration.services.shopify_service import ShopifyIntegrationService

__all__ = [
    "SapIntegrationService",
    "PowerBiIntegrationService",
    "IoTIntegrationService",
    "ShopifyIntegrationService",
]

"""
Vendor API clients.

Exports:
  - VendorApiClient: Shared httpx/tenacity transport
  - SapApiClient, PowerBiApiClient, IoTApiClient, ShopifyApiClient

Dependencies: httpx, tenacity
System role: Outbound HTTP boundary for integration adapters
"""

from scm_backend.boundary.vendors.base_client import VendorApiClient
from scm_backend.boundary.vendors.iot_client import IoTApiClient
from scm_backend.boundary.vendors.power_bi_client import PowerBiApiClient
from scm_backend.boundary.vendors.sap_client import SapApiClient
from scm_backend.boundary.vendors.shopify_client import ShopifyApiClient

__all__ = [
    "VendorApiClient",
    "SapApiClient",
    "PowerBiApiClient",
    "IoTApiClient",
    "ShopifyApiClient",
]

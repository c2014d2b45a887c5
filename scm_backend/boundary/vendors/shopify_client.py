"""
Shopify Admin API client.

Dependencies: scm_backend.boundary.vendors.base_client
System role: Pulls shop metadata, orders, products and customers from a Shopify store
"""

from typing import Any

import httpx

from scm_backend.boundary.vendors.base_client import VendorApiClient
from scm_backend.core.exceptions import IntegrationError


class ShopifyApiClient(VendorApiClient):
    """
    Shopify REST client.

    The base URL is derived from the store domain; without a store URL
    every request fails before touching the network.
    """

    vendor_name = "Shopify"
    status_endpoint = "/shop.json"

    def __init__(
        self,
        api_key: str,
        store_url: str | None = None,
        api_version: str = "2023-07",
        http_client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> None:
        self.store_url = store_url
        base_url = f"https://{store_url}/admin/api/{api_version}" if store_url else ""
        super().__init__(api_key, base_url, http_client=http_client, **kwargs)

    def _headers(self) -> dict[str, str]:
        return {
            "X-Shopify-Access-Token": self.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        data: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        if not self.base_url:
            raise IntegrationError(
                "Store URL is required for Shopify API requests",
                category="ecommerce",
                service="shopify",
            )
        return await super().request(endpoint, method, data, params)

    async def get_shop_info(self) -> dict[str, Any]:
        return await self.request("/shop.json")

    async def get_orders(self, limit: int = 50, status: str = "any") -> list[dict[str, Any]]:
        response = await self.request("/orders.json", params={"limit": limit, "status": status})
        return response["orders"]

    async def get_products(self, limit: int = 50) -> list[dict[str, Any]]:
        response = await self.request("/products.json", params={"limit": limit})
        return response["products"]

    async def get_customers(self, limit: int = 50) -> list[dict[str, Any]]:
        response = await self.request("/customers.json", params={"limit": limit})
        return response["customers"]

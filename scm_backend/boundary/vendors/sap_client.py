"""
SAP ERP API client.

Dependencies: scm_backend.boundary.vendors.base_client
System role: Pulls orders, inventory, warehouses, shipments and transports from SAP
"""

from typing import Any

from scm_backend.boundary.vendors.base_client import VendorApiClient


class SapApiClient(VendorApiClient):
    """SAP REST client using bearer authentication."""

    vendor_name = "SAP"
    status_endpoint = "/system/status"

    async def get_orders(self) -> list[dict[str, Any]]:
        return await self.request("/orders")

    async def get_inventory(self) -> list[dict[str, Any]]:
        return await self.request("/inventory")

    async def get_warehouses(self) -> list[dict[str, Any]]:
        return await self.request("/warehouses")

    async def get_shipments(self) -> list[dict[str, Any]]:
        return await self.request("/shipments")

    async def get_transports(self) -> list[dict[str, Any]]:
        return await self.request("/transports")

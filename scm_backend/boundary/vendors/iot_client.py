"""
IoT platform API client.

Dependencies: scm_backend.boundary.vendors.base_client
System role: Pulls devices, sensor readings and alerts from the IoT platform
"""

from typing import Any

from scm_backend.boundary.vendors.base_client import VendorApiClient


class IoTApiClient(VendorApiClient):
    """IoT platform REST client using bearer authentication."""

    vendor_name = "IoT"
    status_endpoint = "/system/status"

    async def get_devices(self) -> list[dict[str, Any]]:
        return await self.request("/devices")

    async def get_sensor_data(
        self,
        device_id: str,
        from_: str | None = None,
        to: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Readings of one device, optionally bounded by ISO timestamps.

        Args:
            device_id: Platform device id
            from_: Inclusive lower bound (ISO 8601)
            to: Upper bound (ISO 8601)

        Returns:
            List of raw reading dicts
        """
        params = {key: value for key, value in (("from", from_), ("to", to)) if value}
        return await self.request(f"/devices/{device_id}/data", params=params or None)

    async def get_alerts(self, status: str | None = None) -> list[dict[str, Any]]:
        params = {"status": status} if status else None
        return await self.request("/alerts", params=params)

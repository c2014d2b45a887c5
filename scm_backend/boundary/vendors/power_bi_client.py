"""
Power BI API client.

Dependencies: scm_backend.boundary.vendors.base_client
System role: Lists BI artefacts and pushes table rows into Power BI datasets
"""

from typing import Any

from scm_backend.boundary.vendors.base_client import VendorApiClient


class PowerBiApiClient(VendorApiClient):
    """Power BI REST client. The dashboards listing doubles as the connection check."""

    vendor_name = "Power BI"
    status_endpoint = "/dashboards"

    async def get_dashboards(self) -> list[dict[str, Any]]:
        return await self.request("/dashboards")

    async def get_reports(self) -> list[dict[str, Any]]:
        return await self.request("/reports")

    async def get_datasets(self) -> list[dict[str, Any]]:
        return await self.request("/datasets")

    async def push_data(
        self,
        dataset_id: str,
        table_name: str,
        rows: list[dict[str, Any]],
    ) -> Any:
        """
        Append rows to a dataset table.

        Args:
            dataset_id: Target Power BI dataset id
            table_name: Table inside the dataset
            rows: Row dicts matching the table schema

        Returns:
            Vendor response body
        """
        return await self.request(
            f"/datasets/{dataset_id}/tables/{table_name}/rows",
            method="POST",
            data={"rows": rows},
        )

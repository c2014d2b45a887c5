"""
Power BI integration adapter.

Push direction: reads local inventory, orders and shipments and appends
them to the matching Power BI dataset tables.

Dependencies: scm_backend.boundary.vendors, scm_backend.boundary.db.CRUD
System role: BI push adapter
"""

import logging
from typing import Any

from scm_backend.boundary.db.CRUD import inventory_crud, order_crud, shipment_crud
from scm_backend.boundary.vendors import PowerBiApiClient
from scm_backend.core.integration.base import IntegrationService
from scm_backend.core.integration.mappers import PowerBiRowBuilders

logger = logging.getLogger(__name__)

# Table name -> dataset names accepted for it
DATASET_NAMES = {
    "Inventory": ("Inventory", "InventoryData"),
    "Orders": ("Orders", "OrdersData"),
    "Shipments": ("Shipments", "ShipmentsData"),
}


class PowerBiIntegrationService(IntegrationService):
    """Power BI push adapter."""

    vendor_name = "Power BI"
    operation = "push"
    operation_past = "pushed"
    preposition = "to"
    client: PowerBiApiClient

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.datasets: list[dict[str, Any]] = []

    async def prepare(self) -> None:
        self.datasets = await self.client.get_datasets()

    def steps(self):
        return [
            ("Inventory data", "inventory", self.push_inventory_data),
            ("Order data", "orders", self.push_order_data),
            ("Shipment data", "shipments", self.push_shipment_data),
        ]

    def find_dataset(self, table_name: str) -> dict[str, Any]:
        """
        Locate the dataset backing a table.

        Raises:
            LookupError: No dataset carries an accepted name
        """
        names = DATASET_NAMES[table_name]
        for dataset in self.datasets:
            if dataset.get("name") in names:
                return dataset
        raise LookupError(f"{table_name} dataset not found in Power BI")

    async def _push(self, table_name: str, rows: list[dict[str, Any]]) -> dict[str, Any]:
        dataset = self.find_dataset(table_name)
        result = await self.client.push_data(dataset["id"], table_name, rows)
        logger.info(
            f"{__name__}:_push - Pushed {len(rows)} rows to {table_name}",
            extra={"dataset_id": dataset["id"], "user_id": self.user_id},
        )
        return {
            "dataset_id": dataset["id"],
            "table_name": table_name,
            "row_count": len(rows),
            "result": result,
        }

    async def push_inventory_data(self) -> dict[str, Any]:
        items = await inventory_crud.get_all(self.db)
        return await self._push(
            "Inventory", [PowerBiRowBuilders.inventory_row(item) for item in items]
        )

    async def push_order_data(self) -> dict[str, Any]:
        orders = await order_crud.get_all(self.db)
        return await self._push(
            "Orders", [PowerBiRowBuilders.order_row(order) for order in orders]
        )

    async def push_shipment_data(self) -> dict[str, Any]:
        shipments = await shipment_crud.get_all(self.db)
        return await self._push(
            "Shipments", [PowerBiRowBuilders.shipment_row(shipment) for shipment in shipments]
        )

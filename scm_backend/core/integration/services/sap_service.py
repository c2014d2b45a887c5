"""
SAP ERP integration adapter.

Pulls orders, inventory, warehouses, shipments and transports from SAP
and upserts them by natural key. Transports carry no stable key and
are always appended.

Dependencies: scm_backend.boundary.vendors, scm_backend.boundary.db.CRUD
System role: ERP pull adapter
"""

import logging
from typing import Any

from scm_backend.boundary.db.CRUD import (
    inventory_crud,
    order_crud,
    shipment_crud,
    transport_crud,
    warehouse_crud,
)
from scm_backend.boundary.vendors import SapApiClient
from scm_backend.core.integration.base import IntegrationService, RecordOutcome
from scm_backend.core.integration.mappers import SapDataMappers

logger = logging.getLogger(__name__)


class SapIntegrationService(IntegrationService):
    """SAP pull adapter."""

    vendor_name = "SAP"
    client: SapApiClient

    def steps(self):
        return [
            ("Order", "orders", self.process_orders),
            ("Inventory", "inventory", self.process_inventory),
            ("Warehouse", "warehouses", self.process_warehouses),
            ("Shipment", "shipments", self.process_shipments),
            ("Transport", "transports", self.process_transports),
        ]

    async def process_orders(self) -> list[RecordOutcome]:
        sap_orders = await self.client.get_orders()

        async def handle(sap_order: dict[str, Any]) -> RecordOutcome:
            mapped = SapDataMappers.map_order(sap_order, self.user_id)
            order, created = await order_crud.upsert(
                self.db, {"order_number": mapped.pop("order_number")}, mapped
            )
            return {
                "id": order.id,
                "order_number": order.order_number,
                "action": "created" if created else "updated",
            }

        return await self.process_records("order", sap_orders, handle)

    async def process_inventory(self) -> list[RecordOutcome]:
        sap_inventory = await self.client.get_inventory()

        async def handle(sap_item: dict[str, Any]) -> RecordOutcome:
            mapped = SapDataMappers.map_inventory_item(sap_item)
            item, created = await inventory_crud.upsert(
                self.db, {"sku": mapped.pop("sku")}, mapped
            )
            return {
                "id": item.id,
                "sku": item.sku,
                "action": "created" if created else "updated",
            }

        return await self.process_records("inventory item", sap_inventory, handle)

    async def process_warehouses(self) -> list[RecordOutcome]:
        sap_warehouses = await self.client.get_warehouses()

        async def handle(sap_warehouse: dict[str, Any]) -> RecordOutcome:
            mapped = SapDataMappers.map_warehouse(sap_warehouse)
            warehouse, created = await warehouse_crud.upsert(
                self.db, {"name": mapped.pop("name")}, mapped
            )
            return {
                "id": warehouse.id,
                "name": warehouse.name,
                "action": "created" if created else "updated",
            }

        return await self.process_records("warehouse", sap_warehouses, handle)

    async def process_shipments(self) -> list[RecordOutcome]:
        sap_shipments = await self.client.get_shipments()

        async def handle(sap_shipment: dict[str, Any]) -> RecordOutcome:
            mapped = SapDataMappers.map_shipment(sap_shipment, self.user_id)
            shipment, created = await shipment_crud.upsert(
                self.db, {"tracking_number": mapped.pop("tracking_number")}, mapped
            )
            return {
                "id": shipment.id,
                "tracking_number": shipment.tracking_number,
                "action": "created" if created else "updated",
            }

        return await self.process_records("shipment", sap_shipments, handle)

    async def process_transports(self) -> list[RecordOutcome]:
        sap_transports = await self.client.get_transports()

        async def handle(sap_transport: dict[str, Any]) -> RecordOutcome:
            mapped = SapDataMappers.map_transport(sap_transport, self.user_id)
            transport = await transport_crud.create(self.db, **mapped)
            return {"id": transport.id, "type": transport.type, "action": "created"}

        return await self.process_records("transport", sap_transports, handle)

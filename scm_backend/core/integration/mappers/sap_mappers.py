"""
SAP record mappers.

Pure transformations from SAP payloads (camelCase) to column dicts for
the local ORM models. No database access.
"""

from typing import Any

from scm_backend.core.integration.mappers.common import parse_datetime, require

ORDER_STATUS_MAP = {
    "NEW": "PENDING",
    "IN_PROCESS": "PROCESSING",
    "SHIPPED": "SHIPPED",
    "DELIVERED": "DELIVERED",
    "CANCELLED": "CANCELLED",
}

SHIPMENT_STATUS_MAP = {
    "CREATED": "CREATED",
    "PREPARING": "PREPARING",
    "IN_TRANSIT": "IN_TRANSIT",
    "DELIVERED": "DELIVERED",
}


class SapDataMappers:
    """SAP to application model mappers."""

    @staticmethod
    def map_order_status(sap_status: str | None) -> str:
        return ORDER_STATUS_MAP.get(sap_status or "", "PENDING")

    @staticmethod
    def map_shipment_status(sap_status: str | None) -> str:
        return SHIPMENT_STATUS_MAP.get(sap_status or "", "CREATED")

    @classmethod
    def map_order(cls, sap_order: dict[str, Any], user_id: str) -> dict[str, Any]:
        return {
            "order_number": str(require(sap_order, "orderNumber")),
            "customer_id": sap_order.get("customerId"),
            "items": [
                {
                    "product_id": item.get("productId"),
                    "quantity": item.get("quantity"),
                    "price": item.get("price"),
                }
                for item in sap_order.get("items") or []
            ],
            "total_amount": float(sap_order.get("totalAmount") or 0),
            "status": cls.map_order_status(sap_order.get("status")),
            "paid": sap_order.get("paymentStatus") == "PAID",
            "created_by": user_id,
        }

    @staticmethod
    def map_inventory_item(sap_item: dict[str, Any]) -> dict[str, Any]:
        min_amount = sap_item.get("minAmount") or 0
        return {
            "name": require(sap_item, "name"),
            "sku": str(require(sap_item, "sku")),
            "quantity": sap_item.get("quantity") or 0,
            "min_amount": min_amount,
            "replenishment_amount": sap_item.get("replenishmentAmount") or min_amount or 10,
            "location": sap_item.get("location") or "Default",
            "warehouse_id": sap_item.get("warehouseId"),
            "zone_id": sap_item.get("zoneId") or "default",
            "price": sap_item.get("price"),
            "unit_cost": sap_item.get("unitCost"),
            "category": sap_item.get("category"),
            "description": sap_item.get("description") or "",
            "supplier_id": sap_item.get("supplierId"),
            "sap_item_id": sap_item.get("sapId"),
        }

    @staticmethod
    def map_warehouse(sap_warehouse: dict[str, Any]) -> dict[str, Any]:
        return {
            "name": require(sap_warehouse, "name"),
            "location": sap_warehouse.get("location"),
            "capacity": sap_warehouse.get("capacity"),
            "utilization_percentage": sap_warehouse.get("utilizationPercentage"),
            "status": sap_warehouse.get("status"),
            "iot_device_id": sap_warehouse.get("iotDeviceId"),
            "zones": [
                {
                    "name": zone.get("name"),
                    "type": zone.get("type"),
                    "capacity": zone.get("capacity"),
                    "current_occupancy": zone.get("currentOccupancy"),
                    "iot_sensor_ids": dict(zone.get("iotSensorIds") or {}),
                }
                for zone in sap_warehouse.get("zones") or []
            ],
        }

    @classmethod
    def map_shipment(cls, sap_shipment: dict[str, Any], user_id: str) -> dict[str, Any]:
        return {
            "name": sap_shipment.get("name") or f"Shipment {sap_shipment.get('id')}",
            "order_id": sap_shipment.get("orderId"),
            "tracking_number": str(require(sap_shipment, "trackingNumber")),
            "carrier": sap_shipment.get("carrier"),
            "freight_id": sap_shipment.get("freightId"),
            "route_id": sap_shipment.get("routeId"),
            "status": cls.map_shipment_status(sap_shipment.get("status")),
            "destination": sap_shipment.get("destination"),
            "estimated_delivery_date": parse_datetime(sap_shipment.get("estimatedDeliveryDate")),
            "actual_delivery_date": parse_datetime(sap_shipment.get("actualDeliveryDate")),
            "current_location": sap_shipment.get("currentLocation"),
            "user_id": user_id,
        }

    @staticmethod
    def map_transport(sap_transport: dict[str, Any], user_id: str) -> dict[str, Any]:
        return {
            "type": require(sap_transport, "type"),
            "capacity": sap_transport.get("capacity"),
            "current_location": sap_transport.get("currentLocation"),
            "status": sap_transport.get("status"),
            "carrier_id": sap_transport.get("carrierId"),
            "user_id": user_id,
        }

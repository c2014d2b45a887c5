"""
Power BI row builders.

Turn local ORM rows into the flat dicts pushed to Power BI tables.
"""

from datetime import datetime, timezone
from typing import Any

from scm_backend.boundary.db.models import InventoryModel, OrderModel, ShipmentModel


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


class PowerBiRowBuilders:
    """Local model to Power BI row builders."""

    @staticmethod
    def inventory_row(item: InventoryModel, now: datetime | None = None) -> dict[str, Any]:
        return {
            "id": str(item.id),
            "name": item.name,
            "sku": item.sku,
            "quantity": item.quantity,
            "minAmount": item.min_amount,
            "price": item.price,
            "category": item.category,
            "warehouseId": item.warehouse_id,
            "lastUpdated": (now or datetime.now(timezone.utc)).isoformat(),
        }

    @staticmethod
    def order_row(order: OrderModel) -> dict[str, Any]:
        return {
            "id": str(order.id),
            "orderNumber": order.order_number,
            "customerId": order.customer_id,
            "totalAmount": order.total_amount,
            "status": order.status,
            "paid": order.paid,
            "createdAt": _iso(order.created_at),
            "itemCount": len(order.items or []),
        }

    @staticmethod
    def shipment_row(shipment: ShipmentModel) -> dict[str, Any]:
        return {
            "id": str(shipment.id),
            "name": shipment.name,
            "orderId": shipment.order_id,
            "trackingNumber": shipment.tracking_number,
            "carrier": shipment.carrier,
            "status": shipment.status,
            "destination": shipment.destination,
            "estimatedDeliveryDate": _iso(shipment.estimated_delivery_date),
            "actualDeliveryDate": _iso(shipment.actual_delivery_date),
        }

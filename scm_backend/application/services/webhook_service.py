"""
Inbound vendor webhook service.

Applies pushes from SAP (stock levels), the IoT platform (zone
temperature alerts), Power BI (dataset refresh outcomes) and Shopify
(new orders) to the local records of the account that has the matching
integration enabled. Record changes are committed before any
notification is written.

Dependencies: scm_backend.boundary.db.CRUD, scm_backend.application.services.notification_service
System role: Webhook use case orchestration
"""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.application.services.notification_service import NotificationService
from scm_backend.boundary.db.CRUD import inventory_crud, user_crud, warehouse_crud
from scm_backend.boundary.db.models import NotificationType, UserModel
from scm_backend.core.exceptions import NotFoundError
from scm_backend.core.integration.mappers import parse_datetime
from scm_backend.models.webhooks import (
    IoTTemperatureAlertWebhook,
    PowerBiRefreshWebhook,
    SapInventoryWebhook,
    ShopifyOrderWebhook,
)

logger = logging.getLogger(__name__)

Notification = tuple[str, str, str, dict[str, Any]]


class WebhookService:
    """Webhook service orchestrator."""

    def __init__(self, db: AsyncSession, notifier: NotificationService | None = None) -> None:
        """
        Initialize webhook service.

        Args:
            db: Async SQLAlchemy session
            notifier: Notification sink (NotificationService on db by default)
        """
        self.db = db
        self.notifier = notifier or NotificationService(db)

    async def _active_user(self, category: str, service: str, label: str) -> UserModel:
        user = await user_crud.find_with_active_integration(self.db, category, service)
        if user is None:
            raise NotFoundError(
                "user",
                f"{category}/{service}",
                message=f"No user found with active {label} integration",
            )
        return user

    async def _commit_and_notify(self, user_id: str, notifications: list[Notification]) -> None:
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        for type, title, message, data in notifications:
            await self.notifier.create_notification(user_id, type, title, message, data)

    async def handle_sap_inventory(self, payload: SapInventoryWebhook) -> None:
        """
        Apply an SAP stock update to the item carrying the SAP material id.

        Raises:
            NotFoundError: No SAP-enabled user, or no item with that SAP id
        """
        user = await self._active_user("erp_crm", "sap", "SAP")
        item = await inventory_crud.find_one(self.db, sap_item_id=payload.sap_item_id)
        if item is None:
            raise NotFoundError(
                "inventory item", payload.sap_item_id, message="Inventory item not found"
            )

        old_quantity = item.quantity
        item.quantity = payload.quantity
        if payload.price is not None:
            item.price = payload.price
        if payload.unit_cost is not None:
            item.unit_cost = payload.unit_cost
        item.last_sap_sync = datetime.now(timezone.utc)
        item_id, name, sku = str(item.id), item.name, item.sku

        await self._commit_and_notify(
            str(user.id),
            [
                (
                    NotificationType.INVENTORY_UPDATE.value,
                    "Inventory Updated from SAP",
                    f"{name} (SKU: {sku}) has been updated from SAP.",
                    {
                        "itemId": item_id,
                        "sku": sku,
                        "newQuantity": payload.quantity,
                        "oldQuantity": old_quantity,
                        "sapItemId": payload.sap_item_id,
                    },
                )
            ],
        )
        logger.info(
            "SAP inventory webhook applied",
            extra={"sku": sku, "old_quantity": old_quantity, "new_quantity": payload.quantity},
        )

    async def handle_iot_temperature_alert(self, payload: IoTTemperatureAlertWebhook) -> None:
        """
        Record the alerting temperature on the monitored zone and warn the owner.

        Raises:
            NotFoundError: No IoT-enabled user, unknown warehouse, or no zone
                bound to the sensor
        """
        user = await self._active_user("iot", "iot_monitoring", "IoT")
        warehouse = await warehouse_crud.find_one(self.db, iot_device_id=payload.warehouse_id)
        if warehouse is None:
            raise NotFoundError("warehouse", payload.warehouse_id, message="Warehouse not found")

        zones = [dict(zone) for zone in warehouse.zones or []]
        index = next(
            (
                i for i, zone in enumerate(zones)
                if (zone.get("iot_sensor_ids") or {}).get("temperature") == payload.sensor_id
            ),
            None,
        )
        if index is None:
            raise NotFoundError("zone", payload.sensor_id, message="Zone not found")

        timestamp = datetime.now(timezone.utc).isoformat()
        zones[index]["temperature"] = payload.temperature
        zones[index]["last_reading"] = {"temperature": payload.temperature, "timestamp": timestamp}
        warehouse.zones = zones
        warehouse_id, warehouse_name = str(warehouse.id), warehouse.name

        direction = "high" if payload.alert_type.upper() == "HIGH" else "low"
        await self._commit_and_notify(
            str(user.id),
            [
                (
                    NotificationType.WAREHOUSE_UPDATE.value,
                    "Temperature Alert",
                    f"Temperature too {direction} ({payload.temperature}°C) in "
                    f"{payload.zone_name} at {warehouse_name}.",
                    {
                        "warehouseId": warehouse_id,
                        "warehouseName": warehouse_name,
                        "zoneName": payload.zone_name,
                        "temperature": payload.temperature,
                        "threshold": payload.threshold,
                        "alertType": payload.alert_type,
                        "timestamp": timestamp,
                    },
                )
            ],
        )
        logger.info(
            "IoT temperature alert applied",
            extra={"warehouse": warehouse_name, "zone": payload.zone_name, "alert_type": payload.alert_type},
        )

    async def handle_power_bi_refresh(self, payload: PowerBiRefreshWebhook) -> None:
        """
        Store the refresh outcome on the tracked dataset and notify the owner.

        Datasets are tracked under integrations["bi_tools"]["datasets"] as
        {"dataset_id", "last_refresh", "last_refresh_status"}; an untracked
        dataset only produces the notification.

        Raises:
            NotFoundError: No Power BI-enabled user
        """
        user = await self._active_user("bi_tools", "power_bi", "Power BI")

        integrations = dict(user.integrations or {})
        bi_tools = dict(integrations.get("bi_tools") or {})
        datasets = [dict(dataset) for dataset in bi_tools.get("datasets") or []]
        for dataset in datasets:
            if dataset.get("dataset_id") == payload.dataset_id:
                dataset["last_refresh"] = payload.end_time
                dataset["last_refresh_status"] = payload.status
                bi_tools["datasets"] = datasets
                integrations["bi_tools"] = bi_tools
                user.integrations = integrations
                break

        data: dict[str, Any] = {
            "datasetId": payload.dataset_id,
            "datasetName": payload.dataset_name,
            "refreshType": payload.refresh_type,
            "startTime": payload.start_time,
            "endTime": payload.end_time,
        }
        if payload.status == "Completed":
            data["duration"] = _duration_ms(payload.start_time, payload.end_time)
            notification = (
                NotificationType.INTEGRATION_SYNC.value,
                "Power BI Refresh Complete",
                f"The {payload.dataset_name} dataset in Power BI has been refreshed successfully.",
                data,
            )
        else:
            data.update(status=payload.status, error=payload.error)
            notification = (
                NotificationType.INTEGRATION_SYNC.value,
                "Power BI Refresh Failed",
                f"The {payload.dataset_name} dataset in Power BI failed to refresh.",
                data,
            )

        await self._commit_and_notify(str(user.id), [notification])
        logger.info(
            "Power BI refresh webhook applied",
            extra={"dataset_id": payload.dataset_id, "status": payload.status},
        )

    async def handle_shopify_order_created(self, payload: ShopifyOrderWebhook) -> None:
        """
        Deduct ordered quantities from stock and announce the order.

        Line items without a SKU, or whose SKU is not stocked, are ignored.
        An item left at or below its minimum amount raises a low stock alert.

        Raises:
            NotFoundError: No Shopify-enabled user
        """
        user = await self._active_user("ecommerce", "shopify", "Shopify")

        notifications: list[Notification] = []
        for line_item in payload.line_items:
            if not line_item.sku:
                continue
            item = await inventory_crud.find_one(self.db, sku=line_item.sku)
            if item is None:
                continue
            item.quantity = item.quantity - line_item.quantity
            if item.quantity <= item.min_amount:
                notifications.append(
                    (
                        NotificationType.INVENTORY_ALERT.value,
                        "Low Stock Alert",
                        f"{item.name} (SKU: {item.sku}) is running low on stock after a Shopify order.",
                        {
                            "itemId": str(item.id),
                            "sku": item.sku,
                            "currentQuantity": item.quantity,
                            "minAmount": item.min_amount,
                        },
                    )
                )

        customer = payload.customer
        notifications.append(
            (
                NotificationType.ORDER_UPDATE.value,
                "New Shopify Order",
                f"New order #{payload.order_number} received from Shopify for ${payload.total_price}.",
                {
                    "orderId": str(payload.id),
                    "orderNumber": payload.order_number,
                    "totalPrice": payload.total_price,
                    "customerName": (
                        f"{customer.first_name or ''} {customer.last_name or ''}".strip()
                        if customer else None
                    ),
                    "lineItemCount": len(payload.line_items),
                },
            )
        )

        await self._commit_and_notify(str(user.id), notifications)
        logger.info(
            "Shopify order webhook applied",
            extra={"order_number": str(payload.order_number), "low_stock": len(notifications) - 1},
        )


def _duration_ms(start: str | None, end: str | None) -> int | None:
    try:
        started, ended = parse_datetime(start), parse_datetime(end)
    except ValueError:
        return None
    if started is None or ended is None:
        return None
    return int((ended - started).total_seconds() * 1000)

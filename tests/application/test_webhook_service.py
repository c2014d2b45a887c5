"""
Test suite for WebhookService.

System role: Verification of inbound vendor pushes against the database
"""

import pytest

from scm_backend.application.services import NotificationService, WebhookService
from scm_backend.boundary.db.CRUD import (
    inventory_crud,
    notification_crud,
    user_crud,
    warehouse_crud,
)
from scm_backend.core.exceptions import NotFoundError
from scm_backend.models.webhooks import (
    IoTTemperatureAlertWebhook,
    PowerBiRefreshWebhook,
    SapInventoryWebhook,
    ShopifyOrderWebhook,
)


async def _notifications(db, user):
    return await notification_crud.find_many(db, user_id=str(user.id))


class TestSapInventoryWebhook:
    async def test_should_update_item_and_notify(self, make_user, test_async_db) -> None:
        # Arrange
        user = await make_user(integrations={"erp_crm": {"service": "sap", "enabled": True}})
        item = await inventory_crud.create(
            test_async_db, name="Bolt", sku="B-1", quantity=10, sap_item_id="M-1"
        )
        await test_async_db.commit()
        service = WebhookService(test_async_db, NotificationService(test_async_db))

        # Act
        await service.handle_sap_inventory(
            SapInventoryWebhook.model_validate({"sapItemId": "M-1", "quantity": 4, "unitCost": 1.5})
        )

        # Assert
        stored = await inventory_crud.get_by_id(test_async_db, item.id)
        assert stored.quantity == 4
        assert stored.unit_cost == 1.5
        assert stored.last_sap_sync is not None

        [notification] = await _notifications(test_async_db, user)
        assert notification.type.value == "INVENTORY_UPDATE"
        assert notification.title == "Inventory Updated from SAP"
        assert notification.message == "Bolt (SKU: B-1) has been updated from SAP."
        assert notification.data["oldQuantity"] == 10
        assert notification.data["newQuantity"] == 4

    async def test_unknown_item_should_raise(self, make_user, test_async_db) -> None:
        await make_user(integrations={"erp_crm": {"service": "sap", "enabled": True}})

        with pytest.raises(NotFoundError, match="Inventory item not found"):
            await WebhookService(test_async_db).handle_sap_inventory(
                SapInventoryWebhook(sap_item_id="missing", quantity=1)
            )

    async def test_without_active_integration_should_raise(self, make_user, test_async_db) -> None:
        await make_user(integrations={"erp_crm": {"service": "sap", "enabled": False}})

        with pytest.raises(NotFoundError, match="No user found with active SAP integration"):
            await WebhookService(test_async_db).handle_sap_inventory(
                SapInventoryWebhook(sap_item_id="M-1", quantity=1)
            )


class TestIoTTemperatureAlertWebhook:
    async def _seed(self, make_user, db):
        user = await make_user(integrations={"iot": {"service": "iot_monitoring", "enabled": True}})
        warehouse = await warehouse_crud.create(
            db,
            name="Cold Store",
            iot_device_id="wh-dev-1",
            zones=[
                {"name": "Dry", "iot_sensor_ids": {"temperature": "s-0"}},
                {"name": "Freezer", "iot_sensor_ids": {"temperature": "s-1"}},
            ],
        )
        await db.commit()
        return user, warehouse

    def _payload(self, **overrides) -> IoTTemperatureAlertWebhook:
        values = {"sensorId": "s-1", "temperature": 2.5, "threshold": -18, "warehouseId": "wh-dev-1",
                  "zoneName": "Freezer", "alertType": "HIGH"}
        values.update(overrides)
        return IoTTemperatureAlertWebhook.model_validate(values)

    async def test_should_record_zone_reading_and_notify(self, make_user, test_async_db) -> None:
        # Arrange
        user, warehouse = await self._seed(make_user, test_async_db)

        # Act
        await WebhookService(test_async_db).handle_iot_temperature_alert(self._payload())

        # Assert
        stored = await warehouse_crud.get_by_id(test_async_db, warehouse.id)
        assert stored.zones[1]["temperature"] == 2.5
        assert stored.zones[1]["last_reading"]["temperature"] == 2.5
        assert "temperature" not in stored.zones[0]

        [notification] = await _notifications(test_async_db, user)
        assert notification.type.value == "WAREHOUSE_UPDATE"
        assert notification.message == "Temperature too high (2.5°C) in Freezer at Cold Store."
        assert notification.data["alertType"] == "HIGH"

    async def test_low_alert_text(self, make_user, test_async_db) -> None:
        user, _ = await self._seed(make_user, test_async_db)

        await WebhookService(test_async_db).handle_iot_temperature_alert(
            self._payload(temperature=-40.0, alertType="LOW")
        )

        [notification] = await _notifications(test_async_db, user)
        assert notification.message.startswith("Temperature too low (-40.0°C)")

    async def test_unknown_warehouse_or_sensor_should_raise(self, make_user, test_async_db) -> None:
        await self._seed(make_user, test_async_db)
        service = WebhookService(test_async_db)

        with pytest.raises(NotFoundError, match="Warehouse not found"):
            await service.handle_iot_temperature_alert(self._payload(warehouseId="nope"))
        with pytest.raises(NotFoundError, match="Zone not found"):
            await service.handle_iot_temperature_alert(self._payload(sensorId="s-9"))


class TestPowerBiRefreshWebhook:
    async def test_completed_refresh_should_update_dataset(self, make_user, test_async_db) -> None:
        # Arrange
        user = await make_user(
            integrations={
                "bi_tools": {
                    "service": "power_bi",
                    "enabled": True,
                    "datasets": [{"dataset_id": "ds-1"}, {"dataset_id": "ds-2"}],
                }
            }
        )
        payload = PowerBiRefreshWebhook.model_validate(
            {"datasetId": "ds-1", "datasetName": "Sales", "refreshType": "Scheduled",
             "status": "Completed", "startTime": "2024-01-01T00:00:00Z", "endTime": "2024-01-01T00:00:02Z"}
        )

        # Act
        await WebhookService(test_async_db).handle_power_bi_refresh(payload)

        # Assert
        reloaded = await user_crud.get_by_id(test_async_db, user.id)
        datasets = reloaded.integrations["bi_tools"]["datasets"]
        assert datasets[0] == {
            "dataset_id": "ds-1",
            "last_refresh": "2024-01-01T00:00:02Z",
            "last_refresh_status": "Completed",
        }
        assert datasets[1] == {"dataset_id": "ds-2"}

        [notification] = await _notifications(test_async_db, user)
        assert notification.title == "Power BI Refresh Complete"
        assert notification.message == "The Sales dataset in Power BI has been refreshed successfully."
        assert notification.data["duration"] == 2000

    async def test_failed_refresh_should_carry_error(self, make_user, test_async_db) -> None:
        user = await make_user(integrations={"bi_tools": {"service": "power_bi", "enabled": True}})

        await WebhookService(test_async_db).handle_power_bi_refresh(
            PowerBiRefreshWebhook(dataset_id="ds-1", dataset_name="Sales", status="Failed", error="timeout")
        )

        [notification] = await _notifications(test_async_db, user)
        assert notification.title == "Power BI Refresh Failed"
        assert notification.message == "The Sales dataset in Power BI failed to refresh."
        assert notification.data["error"] == "timeout"
        assert notification.data["status"] == "Failed"


class TestShopifyOrderWebhook:
    async def test_should_deduct_stock_and_alert_when_low(self, make_user, test_async_db) -> None:
        # Arrange
        user = await make_user(integrations={"ecommerce": {"service": "shopify", "enabled": True}})
        bolt = await inventory_crud.create(test_async_db, name="Bolt", sku="B-1", quantity=5, min_amount=2)
        nut = await inventory_crud.create(test_async_db, name="Nut", sku="N-1", quantity=50, min_amount=2)
        await test_async_db.commit()
        payload = ShopifyOrderWebhook.model_validate(
            {
                "id": 820982911946154500,
                "order_number": 1001,
                "total_price": "25.00",
                "customer": {"first_name": "Ada", "last_name": "Lovelace"},
                "line_items": [
                    {"sku": "B-1", "quantity": 3},
                    {"sku": "N-1", "quantity": 1},
                    {"sku": "UNKNOWN", "quantity": 1},
                    {"sku": None, "quantity": 1},
                ],
            }
        )

        # Act
        await WebhookService(test_async_db).handle_shopify_order_created(payload)

        # Assert
        assert (await inventory_crud.get_by_id(test_async_db, bolt.id)).quantity == 2
        assert (await inventory_crud.get_by_id(test_async_db, nut.id)).quantity == 49

        notifications = await _notifications(test_async_db, user)
        by_title = {n.title: n for n in notifications}
        assert sorted(by_title) == ["Low Stock Alert", "New Shopify Order"]
        alert, order = by_title["Low Stock Alert"], by_title["New Shopify Order"]
        assert alert.message == "Bolt (SKU: B-1) is running low on stock after a Shopify order."
        assert alert.data["currentQuantity"] == 2
        assert order.message == "New order #1001 received from Shopify for $25.00."
        assert order.data["customerName"] == "Ada Lovelace"
        assert order.data["lineItemCount"] == 4

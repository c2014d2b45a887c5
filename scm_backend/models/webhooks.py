"""
Inbound webhook payload schemas.

SAP, IoT and Power BI send camelCase JSON; Shopify sends snake_case.

Dependencies: pydantic
System role: Vendor webhook contracts
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SapInventoryWebhook(CamelPayload):
    """Stock change pushed by SAP for one material."""

    sap_item_id: str = Field(..., min_length=1)
    quantity: int
    price: float | None = None
    unit_cost: float | None = None


class IoTTemperatureAlertWebhook(CamelPayload):
    """Out-of-range temperature reported by a warehouse zone sensor."""

    sensor_id: str = Field(..., min_length=1)
    temperature: float
    threshold: float | None = None
    warehouse_id: str = Field(..., min_length=1, description="IoT device id of the warehouse")
    zone_name: str
    alert_type: str = Field(..., description="HIGH or LOW")


class PowerBiRefreshWebhook(CamelPayload):
    """Dataset refresh outcome."""

    dataset_id: str
    dataset_name: str
    refresh_type: str | None = None
    status: str = Field(..., description="Completed, Failed, ...")
    start_time: str | None = None
    end_time: str | None = None
    error: Any = None


class ShopifyLineItem(BaseModel):
    sku: str | None = None
    quantity: int = 0


class ShopifyCustomer(BaseModel):
    first_name: str | None = None
    last_name: str | None = None


class ShopifyOrderWebhook(BaseModel):
    """orders/create topic payload; only the fields acted on are declared."""

    id: int | str
    order_number: int | str
    total_price: str = "0.00"
    customer: ShopifyCustomer | None = None
    line_items: list[ShopifyLineItem] = []


class WebhookAck(BaseModel):
    success: bool = True

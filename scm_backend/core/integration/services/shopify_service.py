"""
Shopify integration adapter.

Pulls shop metadata and recent orders. Orders are mirrored raw by
Shopify id; the first time an order is seen a normalized application
order ("SHO-<number>") is created and the user is notified.

Dependencies: scm_backend.boundary.vendors, scm_backend.boundary.db.CRUD
System role: E-commerce pull adapter
"""

import logging
from typing import Any

from scm_backend.boundary.db.CRUD import order_crud, shopify_order_crud, shopify_shop_crud
from scm_backend.boundary.vendors import ShopifyApiClient
from scm_backend.core.integration.base import IntegrationService, RecordOutcome
from scm_backend.core.integration.mappers import ShopifyDataMappers

logger = logging.getLogger(__name__)


class ShopifyIntegrationService(IntegrationService):
    """Shopify pull adapter."""

    vendor_name = "Shopify"
    not_connected_hint = "API key and store URL"
    client: ShopifyApiClient

    def __init__(self, *args: Any, order_limit: int = 50, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.order_limit = order_limit

    def steps(self):
        return [
            ("Shop info", "shop", self.process_shop_info),
            ("Order", "orders", self.process_orders),
        ]

    async def process_shop_info(self) -> RecordOutcome:
        response = await self.client.get_shop_info()
        mapped = ShopifyDataMappers.map_to_shopify_shop(response["shop"], self.user_id)
        shop, created = await shopify_shop_crud.upsert(
            self.db, {"shopify_id": mapped.pop("shopify_id")}, mapped
        )
        return {
            "id": shop.id,
            "name": shop.name,
            "action": "created" if created else "updated",
        }

    async def process_orders(self) -> list[RecordOutcome]:
        shopify_orders = await self.client.get_orders(limit=self.order_limit)

        async def handle(shopify_order: dict[str, Any]) -> RecordOutcome:
            mapped = ShopifyDataMappers.map_to_shopify_order(shopify_order, self.user_id)
            app_order = ShopifyDataMappers.map_to_app_order(shopify_order, self.user_id)
            mirror, created = await shopify_order_crud.upsert(
                self.db, {"shopify_id": mapped.pop("shopify_id")}, mapped
            )

            if created:
                order = await order_crud.create(self.db, **app_order)
                self.notify(
                    "ORDER_UPDATE",
                    "New Shopify Order",
                    f"New order #{mirror.order_number} received from Shopify",
                    {
                        "orderId": str(order.id),
                        "orderNumber": order.order_number,
                        "shopifyOrderId": mirror.shopify_id,
                    },
                )

            return {
                "id": mirror.id,
                "order_number": mirror.order_number,
                "action": "created" if created else "updated",
            }

        return await self.process_records("Shopify order", shopify_orders, handle)

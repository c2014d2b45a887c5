"""
Shopify record mappers.

Shopify payloads are snake_case already; orders map to both the raw
ShopifyOrderModel mirror and a normalized OrderModel row.
"""

from typing import Any

from scm_backend.core.integration.mappers.common import parse_datetime, require

ADDRESS_FIELDS = (
    "first_name",
    "last_name",
    "address1",
    "city",
    "province",
    "country",
    "zip",
    "phone",
)


def _address(address: dict[str, Any] | None) -> dict[str, Any] | None:
    if not address:
        return None
    return {field: address.get(field) for field in ADDRESS_FIELDS}


class ShopifyDataMappers:
    """Shopify to application model mappers."""

    @staticmethod
    def map_order_status(fulfillment_status: str | None, financial_status: str | None) -> str:
        """
        Derive the application order status.

        Fulfillment wins over payment state; an unfulfilled paid order is
        being processed.
        """
        if fulfillment_status == "fulfilled":
            return "DELIVERED"
        if fulfillment_status == "partial":
            return "PROCESSING"
        if fulfillment_status is None and financial_status == "paid":
            return "PROCESSING"
        if financial_status in ("refunded", "voided"):
            return "CANCELLED"
        return "PENDING"

    @classmethod
    def map_to_app_order(cls, shopify_order: dict[str, Any], user_id: str) -> dict[str, Any]:
        customer = shopify_order.get("customer")
        return {
            "order_number": f"SHO-{require(shopify_order, 'order_number')}",
            "customer_id": str(customer["id"]) if customer else "unknown",
            "items": [
                {
                    "product_id": str(item.get("product_id")),
                    "quantity": item.get("quantity"),
                    "price": float(item.get("price") or 0),
                }
                for item in shopify_order.get("line_items") or []
            ],
            "total_amount": float(shopify_order.get("total_price") or 0),
            "status": cls.map_order_status(
                shopify_order.get("fulfillment_status"),
                shopify_order.get("financial_status"),
            ),
            "paid": shopify_order.get("financial_status") == "paid",
            "created_by": user_id,
        }

    @staticmethod
    def map_to_shopify_order(shopify_order: dict[str, Any], user_id: str) -> dict[str, Any]:
        customer = shopify_order.get("customer")
        return {
            "shopify_id": str(require(shopify_order, "id")),
            "order_number": int(require(shopify_order, "order_number")),
            "placed_at": parse_datetime(shopify_order.get("created_at")),
            "total_price": str(shopify_order.get("total_price") or "0.00"),
            "customer": (
                {
                    "id": customer.get("id"),
                    "first_name": customer.get("first_name"),
                    "last_name": customer.get("last_name"),
                    "email": customer.get("email"),
                    "orders_count": customer.get("orders_count"),
                    "total_spent": customer.get("total_spent"),
                }
                if customer
                else None
            ),
            "fulfillment_status": shopify_order.get("fulfillment_status"),
            "financial_status": shopify_order.get("financial_status"),
            "items": [
                {
                    "id": item.get("id"),
                    "title": item.get("title"),
                    "quantity": item.get("quantity"),
                    "price": item.get("price"),
                    "sku": item.get("sku"),
                    "name": item.get("name"),
                    "variant_id": item.get("variant_id"),
                    "product_id": item.get("product_id"),
                }
                for item in shopify_order.get("line_items") or []
            ],
            "billing_address": _address(shopify_order.get("billing_address")),
            "shipping_address": _address(shopify_order.get("shipping_address")),
            "user_id": user_id,
        }

    @staticmethod
    def map_to_shopify_shop(shopify_shop: dict[str, Any], user_id: str) -> dict[str, Any]:
        return {
            "shopify_id": str(require(shopify_shop, "id")),
            "name": require(shopify_shop, "name"),
            "email": shopify_shop.get("email"),
            "domain": require(shopify_shop, "domain"),
            "user_id": user_id,
        }

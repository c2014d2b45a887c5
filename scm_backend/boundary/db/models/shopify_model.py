"""
Shopify ORM models.

Raw mirrors of Shopify orders and shop metadata, kept alongside the
normalized OrderModel rows created from them.

Dependencies: sqlalchemy, scm_backend.boundary.db.base
System role: E-commerce mirror persistence for the Shopify sync adapter
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from scm_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ShopifyOrderModel(Base, UUIDMixin, TimestampMixin):
    """
    Shopify order mirror keyed by Shopify id.

    Attributes:
        placed_at: Order creation time reported by Shopify
        customer: JSON snapshot of the Shopify customer (or None)
        items: JSON list of line items
        billing_address / shipping_address: JSON address snapshots (or None)
    """

    __tablename__ = "shopify_orders"

    shopify_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    order_number: Mapped[int] = mapped_column(Integer, nullable=False)
    placed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    total_price: Mapped[str] = mapped_column(String(32), nullable=False)
    customer: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    fulfillment_status: Mapped[str | None] = mapped_column(String(32), nullable=True)
    financial_status: Mapped[str | None] = mapped_column(String(32), nullable=True)
    items: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    billing_address: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    shipping_address: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)


class ShopifyShopModel(Base, UUIDMixin, TimestampMixin):
    """Shopify shop metadata keyed by Shopify id."""

    __tablename__ = "shopify_shops"

    shopify_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    domain: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

"""
Inventory ORM model.

Dependencies: sqlalchemy, scm_backend.boundary.db.base
System role: Stock item persistence (natural key: sku)
"""

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from scm_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class InventoryModel(Base, UUIDMixin, TimestampMixin):
    """
    Inventory item ORM model keyed by SKU.

    Attributes:
        sap_item_id: SAP material id, used by inbound SAP stock webhooks
        last_sap_sync: When SAP last pushed a stock change for the item
    """

    __tablename__ = "inventory"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    sku: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    min_amount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    replenishment_amount: Mapped[int] = mapped_column(Integer, nullable=False, default=10)
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="Default")
    warehouse_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    zone_id: Mapped[str] = mapped_column(String(128), nullable=False, default="default")
    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    unit_cost: Mapped[float | None] = mapped_column(Float, nullable=True)
    category: Mapped[str | None] = mapped_column(String(128), nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    supplier_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    sap_item_id: Mapped[str | None] = mapped_column(String(128), nullable=True, unique=True, index=True)
    last_sap_sync: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

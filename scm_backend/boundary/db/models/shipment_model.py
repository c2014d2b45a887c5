"""
Shipment and transport ORM models.

Dependencies: sqlalchemy, scm_backend.boundary.db.base
System role: Logistics persistence (shipments keyed by tracking number,
transports append-only)
"""

from datetime import datetime

from sqlalchemy import DateTime, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from scm_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ShipmentModel(Base, UUIDMixin, TimestampMixin):
    """Shipment ORM model keyed by tracking number."""

    __tablename__ = "shipments"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    order_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    tracking_number: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    carrier: Mapped[str | None] = mapped_column(String(128), nullable=True)
    freight_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    route_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="CREATED")
    destination: Mapped[str | None] = mapped_column(String(255), nullable=True)
    estimated_delivery_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    actual_delivery_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    current_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_id: Mapped[str | None] = mapped_column(String(64), nullable=True)


class TransportModel(Base, UUIDMixin, TimestampMixin):
    """Transport vehicle ORM model. Vendor transports carry no stable key."""

    __tablename__ = "transports"

    type: Mapped[str] = mapped_column(String(64), nullable=False)
    capacity: Mapped[float | None] = mapped_column(Float, nullable=True)
    current_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str | None] = mapped_column(String(32), nullable=True)
    carrier_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    user_id: Mapped[str | None] = mapped_column(String(64), nullable=True)

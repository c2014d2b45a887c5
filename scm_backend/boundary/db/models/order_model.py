"""
Order ORM model.

Dependencies: sqlalchemy, scm_backend.boundary.db.base
System role: Sales order persistence (natural key: order_number)
"""

from sqlalchemy import JSON, Boolean, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from scm_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class OrderModel(Base, UUIDMixin, TimestampMixin):
    """
    Order ORM model.

    Orders arrive from the app itself or from ERP / e-commerce syncs.
    order_number is the idempotency key for upserts.
    """

    __tablename__ = "orders"

    order_number: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    customer_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    items: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    total_amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="PENDING")
    paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_by: Mapped[str | None] = mapped_column(String(64), nullable=True)

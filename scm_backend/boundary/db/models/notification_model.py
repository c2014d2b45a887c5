"""
Notification ORM model.

User-facing notifications emitted by integrations, order updates and
inventory alerts.

Dependencies: sqlalchemy, scm_backend.boundary.db.base
System role: Notification persistence
"""

import enum

from sqlalchemy import JSON, Boolean, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from scm_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class NotificationType(str, enum.Enum):
    """Notification categories."""

    GENERAL = "GENERAL"
    ORDER_UPDATE = "ORDER_UPDATE"
    INVENTORY_ALERT = "INVENTORY_ALERT"
    INTEGRATION_STATUS = "INTEGRATION_STATUS"
    WAREHOUSE_UPDATE = "WAREHOUSE_UPDATE"
    MANUFACTURING_ORDER = "MANUFACTURING_ORDER"
    STOCK_MOVEMENT = "STOCK_MOVEMENT"
    INVENTORY_UPDATE = "INVENTORY_UPDATE"
    INTEGRATION_SYNC = "INTEGRATION_SYNC"


class NotificationModel(Base, UUIDMixin, TimestampMixin):
    """
    Notification ORM model.

    Attributes:
        user_id: Recipient user id
        type: Notification category
        title: Short headline
        message: Body text
        data: JSON payload with entity references (order ids, sync counts, ...)
        read: Whether the recipient has seen it
    """

    __tablename__ = "notifications"

    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    type: Mapped[NotificationType] = mapped_column(
        Enum(NotificationType, native_enum=False),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

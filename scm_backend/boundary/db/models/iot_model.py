"""
IoT ORM models.

Local mirrors of IoT platform devices, sensor readings and alerts.

Dependencies: sqlalchemy, scm_backend.boundary.db.base
System role: IoT telemetry persistence for the IoT sync adapter
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Float, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from scm_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class IoTDeviceModel(Base, UUIDMixin, TimestampMixin):
    """IoT device keyed by the platform device id."""

    __tablename__ = "iot_devices"

    device_id: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_seen: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    battery_level: Mapped[float | None] = mapped_column(Float, nullable=True)
    firmware_version: Mapped[str | None] = mapped_column(String(64), nullable=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)


class IoTSensorDataModel(Base, UUIDMixin, TimestampMixin):
    """Append-only sensor reading."""

    __tablename__ = "iot_sensor_data"

    device_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    value: Mapped[Any] = mapped_column(JSON, nullable=False)
    unit: Mapped[str | None] = mapped_column(String(32), nullable=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)


class IoTAlertModel(Base, UUIDMixin, TimestampMixin):
    """
    IoT alert.

    Natural key is (device_id, timestamp, type); the platform does not
    expose a stable alert id.
    """

    __tablename__ = "iot_alerts"
    __table_args__ = (
        UniqueConstraint("device_id", "timestamp", "type", name="uq_iot_alert_key"),
    )

    device_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    severity: Mapped[str] = mapped_column(String(32), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    acknowledged_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    acknowledged_by: Mapped[str | None] = mapped_column(String(128), nullable=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

"""
Warehouse ORM model.

Dependencies: sqlalchemy, scm_backend.boundary.db.base
System role: Warehouse persistence (natural key: name)
"""

from sqlalchemy import JSON, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from scm_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class WarehouseModel(Base, UUIDMixin, TimestampMixin):
    """
    Warehouse ORM model.

    Attributes:
        name: Unique warehouse name
        iot_device_id: IoT platform id reported by temperature webhooks
        zones: JSON list of {"name", "type", "capacity", "current_occupancy",
            "iot_sensor_ids"}; monitored zones also carry "temperature"
            and "last_reading"
    """

    __tablename__ = "warehouses"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    capacity: Mapped[float | None] = mapped_column(Float, nullable=True)
    utilization_percentage: Mapped[float | None] = mapped_column(Float, nullable=True)
    status: Mapped[str | None] = mapped_column(String(32), nullable=True)
    iot_device_id: Mapped[str | None] = mapped_column(String(128), nullable=True, index=True)
    zones: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

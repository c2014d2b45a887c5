"""
IoT CRUD operations.

Dependencies: sqlalchemy, scm_backend.boundary.db.models
System role: IoT device, reading and alert persistence
"""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.boundary.db.CRUD.base_crud import BaseCRUD
from scm_backend.boundary.db.models.iot_model import (
    IoTAlertModel,
    IoTDeviceModel,
    IoTSensorDataModel,
)


class IoTSensorDataCRUD(BaseCRUD[IoTSensorDataModel]):
    """CRUD operations for sensor readings."""

    def __init__(self) -> None:
        super().__init__(IoTSensorDataModel)

    async def get_latest_timestamp(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> datetime | None:
        """
        Timestamp of the newest stored reading for a user.

        Args:
            session: Async database session
            user_id: Owner user id

        Returns:
            Newest reading timestamp, or None when nothing was stored yet
        """
        stmt = (
            select(IoTSensorDataModel.timestamp)
            .where(IoTSensorDataModel.user_id == user_id)
            .order_by(IoTSensorDataModel.timestamp.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


iot_device_crud = BaseCRUD(IoTDeviceModel)
iot_sensor_data_crud = IoTSensorDataCRUD()
iot_alert_crud = BaseCRUD(IoTAlertModel)

"""
IoT platform integration adapter.

Pulls devices (upsert by device id), sensor readings (append-only,
incremental from the newest stored reading) and active alerts (upsert by
device, timestamp and type). New alerts raise an inventory alert
notification.

Dependencies: scm_backend.boundary.vendors, scm_backend.boundary.db.CRUD
System role: IoT telemetry pull adapter
"""

import logging
from datetime import datetime, timezone
from typing import Any

from scm_backend.boundary.db.CRUD import (
    iot_alert_crud,
    iot_device_crud,
    iot_sensor_data_crud,
)
from scm_backend.boundary.vendors import IoTApiClient
from scm_backend.core.integration.base import IntegrationService, RecordOutcome
from scm_backend.core.integration.mappers import IoTDataMappers, parse_datetime

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class IoTIntegrationService(IntegrationService):
    """IoT pull adapter."""

    vendor_name = "IoT"
    vendor_label = "IoT platform"
    client: IoTApiClient

    def steps(self):
        return [
            ("Device", "devices", self.process_devices),
            ("Sensor data", "sensor_data", self.process_sensor_data),
            ("Alert", "alerts", self.process_alerts),
        ]

    async def process_devices(self) -> list[RecordOutcome]:
        iot_devices = await self.client.get_devices()

        async def handle(iot_device: dict[str, Any]) -> RecordOutcome:
            mapped = IoTDataMappers.map_device(iot_device)
            mapped["user_id"] = self.user_id
            device, created = await iot_device_crud.upsert(
                self.db, {"device_id": mapped.pop("device_id")}, mapped
            )
            return {
                "id": device.id,
                "device_id": device.device_id,
                "action": "created" if created else "updated",
            }

        return await self.process_records("device", iot_devices, handle)

    async def process_sensor_data(self) -> list[RecordOutcome]:
        """
        Append readings for every known device since the newest stored one.

        A failing device fetch yields one error outcome for that device and
        the remaining devices are still processed.
        """
        devices = await iot_device_crud.find_many(self.db, user_id=self.user_id)
        latest = parse_datetime(await iot_sensor_data_crud.get_latest_timestamp(self.db, self.user_id))
        from_timestamp = (latest or EPOCH).isoformat()

        async def handle(reading: dict[str, Any]) -> RecordOutcome:
            mapped = IoTDataMappers.map_sensor_data(reading)
            mapped["user_id"] = self.user_id
            data = await iot_sensor_data_crud.create(self.db, **mapped)
            return {
                "id": data.id,
                "device_id": data.device_id,
                "timestamp": data.timestamp,
                "action": "created",
            }

        outcomes: list[RecordOutcome] = []
        for device in devices:
            try:
                readings = await self.client.get_sensor_data(device.device_id, from_timestamp)
            except Exception as e:
                logger.error(
                    f"{__name__}:process_sensor_data - Failed to get sensor data for device {device.device_id}: {e}"
                )
                outcomes.append(
                    {"error": f"Failed to get sensor data for device {device.device_id}: {e}"}
                )
                continue
            outcomes.extend(
                await self.process_records("sensor data", _newer_than(readings, latest), handle)
            )
        return outcomes

    async def process_alerts(self) -> list[RecordOutcome]:
        iot_alerts = await self.client.get_alerts("ACTIVE")

        async def handle(iot_alert: dict[str, Any]) -> RecordOutcome:
            mapped = IoTDataMappers.map_alert(iot_alert)
            mapped["user_id"] = self.user_id
            lookup = {
                "device_id": mapped.pop("device_id"),
                "timestamp": mapped.pop("timestamp"),
                "type": mapped.pop("type"),
            }
            alert, created = await iot_alert_crud.upsert(self.db, lookup, mapped)

            if created:
                self.notify(
                    "INVENTORY_ALERT",
                    f"IoT Alert: {alert.type}",
                    alert.message,
                    {
                        "alertId": str(alert.id),
                        "deviceId": alert.device_id,
                        "severity": alert.severity,
                    },
                )

            return {
                "id": alert.id,
                "device_id": alert.device_id,
                "type": alert.type,
                "action": "created" if created else "updated",
            }

        return await self.process_records("alert", iot_alerts, handle)


def _newer_than(readings: list[dict[str, Any]], latest: datetime | None) -> list[dict[str, Any]]:
    """
    Drop readings already stored by a previous sync.

    Vendors treat the "from" bound inclusively, so the newest stored
    reading comes back on every run. Unparseable timestamps are kept and
    reported by the record handler.
    """
    if latest is None:
        return list(readings)
    fresh = []
    for reading in readings:
        try:
            timestamp = parse_datetime(reading.get("timestamp"))
        except (AttributeError, ValueError):
            timestamp = None
        if timestamp is None or timestamp > latest:
            fresh.append(reading)
    return fresh

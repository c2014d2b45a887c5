"""IoT platform record mappers."""

from typing import Any

from scm_backend.core.integration.mappers.common import parse_datetime, require


class IoTDataMappers:
    """IoT platform to application model mappers."""

    @staticmethod
    def map_device(iot_device: dict[str, Any]) -> dict[str, Any]:
        return {
            "device_id": str(require(iot_device, "id")),
            "name": require(iot_device, "name"),
            "type": require(iot_device, "type"),
            "status": require(iot_device, "status"),
            "location": iot_device.get("location"),
            "last_seen": parse_datetime(iot_device.get("lastSeen")),
            "battery_level": iot_device.get("batteryLevel"),
            "firmware_version": iot_device.get("firmwareVersion"),
        }

    @staticmethod
    def map_sensor_data(iot_sensor_data: dict[str, Any]) -> dict[str, Any]:
        return {
            "device_id": str(require(iot_sensor_data, "deviceId")),
            "timestamp": parse_datetime(require(iot_sensor_data, "timestamp")),
            "type": require(iot_sensor_data, "type"),
            "value": require(iot_sensor_data, "value"),
            "unit": iot_sensor_data.get("unit"),
        }

    @staticmethod
    def map_alert(iot_alert: dict[str, Any]) -> dict[str, Any]:
        return {
            "device_id": str(require(iot_alert, "deviceId")),
            "timestamp": parse_datetime(require(iot_alert, "timestamp")),
            "type": require(iot_alert, "type"),
            "severity": require(iot_alert, "severity"),
            "message": require(iot_alert, "message"),
            "status": require(iot_alert, "status"),
            "acknowledged_at": parse_datetime(iot_alert.get("acknowledgedAt")),
            "acknowledged_by": iot_alert.get("acknowledgedBy"),
        }

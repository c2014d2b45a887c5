"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from scm_backend.boundary.db.CRUD import order_crud, notification_crud

    order, created = await order_crud.upsert(
        db, {"order_number": "SO-1"}, mapped_order
    )
"""

from scm_backend.boundary.db.CRUD.base_crud import BaseCRUD
from scm_backend.boundary.db.CRUD.domain_crud import (
    inventory_crud,
    onboarding_crud,
    order_crud,
    shipment_crud,
    shopify_order_crud,
    shopify_shop_crud,
    transport_crud,
    warehouse_crud,
)
from scm_backend.boundary.db.CRUD.iot_crud import (
    IoTSensorDataCRUD,
    iot_alert_crud,
    iot_device_crud,
    iot_sensor_data_crud,
)
from scm_backend.boundary.db.CRUD.kyc_crud import (
    KYCDocumentCRUD,
    KYCSubmissionCRUD,
    kyc_document_crud,
    kyc_submission_crud,
)
from scm_backend.boundary.db.CRUD.notification_crud import NotificationCRUD, notification_crud
from scm_backend.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "user_crud",
    "NotificationCRUD",
    "notification_crud",
    "IoTSensorDataCRUD",
    "iot_device_crud",
    "iot_sensor_data_crud",
    "iot_alert_crud",
    "KYCSubmissionCRUD",
    "KYCDocumentCRUD",
    "kyc_submission_crud",
    "kyc_document_crud",
    "order_crud",
    "inventory_crud",
    "warehouse_crud",
    "shipment_crud",
    "transport_crud",
    "shopify_order_crud",
    "shopify_shop_crud",
    "onboarding_crud",
]

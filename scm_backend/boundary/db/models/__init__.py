"""
Database models package.

Exports every ORM model so that Base.metadata sees all tables.

Dependencies: sqlalchemy, scm_backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from scm_backend.boundary.db.models.user_model import (
    KYCStatus,
    OnboardingStatus,
    UserModel,
    UserRole,
)
from scm_backend.boundary.db.models.order_model import OrderModel
from scm_backend.boundary.db.models.inventory_model import InventoryModel
from scm_backend.boundary.db.models.warehouse_model import WarehouseModel
from scm_backend.boundary.db.models.shipment_model import ShipmentModel, TransportModel
from scm_backend.boundary.db.models.iot_model import (
    IoTAlertModel,
    IoTDeviceModel,
    IoTSensorDataModel,
)
from scm_backend.boundary.db.models.shopify_model import ShopifyOrderModel, ShopifyShopModel
from scm_backend.boundary.db.models.notification_model import (
    NotificationModel,
    NotificationType,
)
from scm_backend.boundary.db.models.kyc_model import (
    KYCDocumentModel,
    KYCSubmissionModel,
    KYCSubmissionStatus,
)
from scm_backend.boundary.db.models.onboarding_model import (
    OnboardingModel,
    OnboardingStepStatus,
)

__all__ = [
    "UserModel",
    "UserRole",
    "KYCStatus",
    "OnboardingStatus",
    "OrderModel",
    "InventoryModel",
    "WarehouseModel",
    "ShipmentModel",
    "TransportModel",
    "IoTDeviceModel",
    "IoTSensorDataModel",
    "IoTAlertModel",
    "ShopifyOrderModel",
    "ShopifyShopModel",
    "NotificationModel",
    "NotificationType",
    "KYCSubmissionModel",
    "KYCSubmissionStatus",
    "KYCDocumentModel",
    "OnboardingModel",
    "OnboardingStepStatus",
]

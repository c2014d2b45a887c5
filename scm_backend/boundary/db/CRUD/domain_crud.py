"""
CRUD singletons for synced domain records.

These models need nothing beyond BaseCRUD (natural-key upsert and
lookups), so they share the generic implementation.

Dependencies: scm_backend.boundary.db.CRUD.base_crud, scm_backend.boundary.db.models
System role: Persistence targets for integration sync adapters
"""

from scm_backend.boundary.db.CRUD.base_crud import BaseCRUD
from scm_backend.boundary.db.models.inventory_model import InventoryModel
from scm_backend.boundary.db.models.onboarding_model import OnboardingModel
from scm_backend.boundary.db.models.order_model import OrderModel
from scm_backend.boundary.db.models.shipment_model import ShipmentModel, TransportModel
from scm_backend.boundary.db.models.shopify_model import ShopifyOrderModel, ShopifyShopModel
from scm_backend.boundary.db.models.warehouse_model import WarehouseModel

order_crud = BaseCRUD(OrderModel)
inventory_crud = BaseCRUD(InventoryModel)
warehouse_crud = BaseCRUD(WarehouseModel)
shipment_crud = BaseCRUD(ShipmentModel)
transport_crud = BaseCRUD(TransportModel)
shopify_order_crud = BaseCRUD(ShopifyOrderModel)
shopify_shop_crud = BaseCRUD(ShopifyShopModel)
onboarding_crud = BaseCRUD(OnboardingModel)

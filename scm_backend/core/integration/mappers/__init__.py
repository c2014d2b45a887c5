"""Pure vendor-to-application data mappers."""

from scm_backend.core.integration.mappers.common import parse_datetime
from scm_backend.core.integration.mappers.iot_mappers import IoTDataMappers
from scm_backend.core.integration.mappers.power_bi_rows import PowerBiRowBuilders
from scm_backend.core.integration.mappers.sap_mappers import SapDataMappers
from scm_backend.core.integration.mappers.shopify_mappers import ShopifyDataMappers

__all__ = [
    "parse_datetime",
    "SapDataMappers",
    "IoTDataMappers",
    "ShopifyDataMappers",
    "PowerBiRowBuilders",
]

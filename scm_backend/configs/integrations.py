"""
Integration configuration settings.

Base URLs, timeouts and retry policy for the vendor API clients
(SAP, Power BI, IoT platform, Shopify).

Dependencies: pydantic, pydantic_settings
System role: Vendor connectivity configuration for the sync adapters
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from scm_backend.configs.base import ENV_FILE_CONFIG, BaseSettings


class IntegrationSettings(BaseSettings):
    """Vendor API endpoints and HTTP behaviour for integration adapters."""

    model_config = SettingsConfigDict(**ENV_FILE_CONFIG, env_prefix="INTEGRATION_")

    sap_base_url: str = Field(
        default="https://api.sap.com/v1",
        description="SAP REST API base URL",
    )
    power_bi_base_url: str = Field(
        default="https://api.powerbi.com/v1.0",
        description="Power BI REST API base URL",
    )
    iot_base_url: str = Field(
        default="https://api.iot-platform.com/v1",
        description="IoT platform REST API base URL",
    )
    shopify_api_version: str = Field(
        default="2023-07",
        description="Shopify Admin API version segment",
    )
    shopify_order_limit: int = Field(
        default=100,
        description="Maximum number of Shopify orders pulled per sync",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Vendor HTTP request timeout in seconds",
    )
    max_retries: int = Field(
        default=3,
        description="Attempts for retryable vendor failures (transport, 429, 5xx)",
    )

"""
Inbound webhook configuration settings.

Shared secrets used to verify vendor webhook signatures. A vendor
without a configured secret is accepted unverified, which is only
meant for local development.

Dependencies: pydantic, pydantic_settings
System role: Webhook authentication configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from scm_backend.configs.base import ENV_FILE_CONFIG, BaseSettings


class WebhookSettings(BaseSettings):
    """Per-vendor webhook signing secrets."""

    model_config = SettingsConfigDict(**ENV_FILE_CONFIG, env_prefix="WEBHOOK_")

    sap_secret: str | None = Field(default=None, description="HMAC secret for SAP stock webhooks")
    iot_secret: str | None = Field(default=None, description="HMAC secret for IoT alert webhooks")
    power_bi_secret: str | None = Field(
        default=None,
        description="HMAC secret for Power BI refresh webhooks",
    )
    shopify_secret: str | None = Field(
        default=None,
        description="Shopify app secret used for X-Shopify-Hmac-Sha256",
    )

    def secret_for(self, vendor: str) -> str | None:
        return getattr(self, f"{vendor}_secret", None)

"""
Integration schemas.

Request/response schemas for integration settings, connection and sync.

Dependencies: pydantic, scm_backend.core.integration
System role: Integration API contracts
"""

from pydantic import BaseModel, Field

from scm_backend.core.integration import SyncResult


class IntegrationSettingsResponse(BaseModel):
    """Stored settings of one integration category (API key omitted)."""

    category: str
    service: str | None = None
    enabled: bool = False
    has_api_key: bool = False
    store_url: str | None = None


class UpdateIntegrationRequest(BaseModel):
    """Request schema for replacing a category's settings."""

    service: str = Field(..., min_length=1, max_length=64, description="Vendor service identifier")
    enabled: bool = Field(default=True)
    api_key: str | None = Field(default=None, max_length=1024)
    store_url: str | None = Field(default=None, max_length=255, description="Shopify store domain")


class ConnectIntegrationRequest(BaseModel):
    """Request schema for connecting a vendor."""

    service: str = Field(..., min_length=1, max_length=64)
    api_key: str = Field(..., min_length=1, max_length=1024)
    store_url: str | None = Field(default=None, max_length=255)


class DisconnectIntegrationRequest(BaseModel):
    """Request schema for disconnecting a vendor."""

    service: str = Field(..., min_length=1, max_length=64)


class ConnectionResponse(BaseModel):
    """Outcome of a connect/disconnect call."""

    category: str
    service: str
    success: bool


class ActiveIntegrationsResponse(BaseModel):
    """Enabled services per category."""

    integrations: dict[str, list[str]]


class SyncAllResponse(BaseModel):
    """Per-integration sync results keyed by "category/service"."""

    results: dict[str, SyncResult]

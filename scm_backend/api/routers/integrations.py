"""
Integration API endpoints.

Routes:
- GET /integrations/active - Enabled services per category
- POST /integrations/sync - Sync every enabled integration
- GET /integrations/{category} - Stored settings of a category
- PUT /integrations/{category} - Replace a category's settings
- POST /integrations/{category}/connect - Verify credentials and enable
- POST /integrations/{category}/disconnect - Disable

Dependencies: scm_backend.application.services, scm_backend.models
System role: Integration management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from scm_backend.api.deps.dependencies import get_integration_manager
from scm_backend.api.error_handling import handle_domain_errors
from scm_backend.application.services.integration_manager import (
    IntegrationManager,
    validate_category,
)
from scm_backend.models.integration import (
    ActiveIntegrationsResponse,
    ConnectIntegrationRequest,
    ConnectionResponse,
    DisconnectIntegrationRequest,
    IntegrationSettingsResponse,
    SyncAllResponse,
    UpdateIntegrationRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/integrations", tags=["integrations"])


def _settings_response(category: str, settings: dict) -> IntegrationSettingsResponse:
    return IntegrationSettingsResponse(
        category=category,
        service=settings.get("service"),
        enabled=bool(settings.get("enabled")),
        has_api_key=bool(settings.get("api_key")),
        store_url=settings.get("store_url"),
    )


@router.get("/active", response_model=ActiveIntegrationsResponse)
@handle_domain_errors
async def get_active_integrations(
    manager: IntegrationManager = Depends(get_integration_manager),
) -> ActiveIntegrationsResponse:
    """List enabled services grouped by category."""
    integrations = await manager.get_active_integrations()
    return ActiveIntegrationsResponse(integrations=integrations)


@router.post("/sync", response_model=SyncAllResponse)
@handle_domain_errors
async def sync_integrations(
    manager: IntegrationManager = Depends(get_integration_manager),
) -> SyncAllResponse:
    """
    Sync every enabled integration of the caller.

    One integration failing does not abort the others; its failure is
    reported in its own result entry.
    """
    results = await manager.sync_all_integrations()
    return SyncAllResponse(results=results)


@router.get("/{category}", response_model=IntegrationSettingsResponse)
@handle_domain_errors
async def get_integration(
    category: str,
    manager: IntegrationManager = Depends(get_integration_manager),
) -> IntegrationSettingsResponse:
    """
    Get stored settings of one category. The API key is never returned.

    Raises:
        HTTPException(400): Unknown category
        HTTPException(404): User not found
    """
    settings = await manager.get_integration(category)
    return _settings_response(category, settings)


@router.put("/{category}", response_model=IntegrationSettingsResponse)
@handle_domain_errors
async def update_integration(
    category: str,
    request: UpdateIntegrationRequest,
    manager: IntegrationManager = Depends(get_integration_manager),
) -> IntegrationSettingsResponse:
    """
    Replace a category's settings.

    Raises:
        HTTPException(400): Unknown category or missing service
        HTTPException(404): User not found
    """
    settings = await manager.update_integration(
        category,
        request.service,
        enabled=request.enabled,
        api_key=request.api_key,
        store_url=request.store_url,
    )
    return _settings_response(category, settings)


@router.post("/{category}/connect", response_model=ConnectionResponse)
@handle_domain_errors
async def connect_integration(
    category: str,
    request: ConnectIntegrationRequest,
    manager: IntegrationManager = Depends(get_integration_manager),
) -> ConnectionResponse:
    """Verify credentials with the vendor and enable the integration."""
    validate_category(category)
    success = await manager.connect_integration(
        category, request.service, request.api_key, request.store_url
    )
    return ConnectionResponse(category=category, service=request.service, success=success)


@router.post("/{category}/disconnect", response_model=ConnectionResponse)
@handle_domain_errors
async def disconnect_integration(
    category: str,
    request: DisconnectIntegrationRequest,
    manager: IntegrationManager = Depends(get_integration_manager),
) -> ConnectionResponse:
    """Disable an integration, keeping its stored credentials."""
    validate_category(category)
    success = await manager.disconnect_integration(category, request.service)
    return ConnectionResponse(category=category, service=request.service, success=success)

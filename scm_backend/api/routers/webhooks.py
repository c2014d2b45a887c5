"""
Inbound vendor webhook endpoints.

Routes:
- POST /webhooks/sap/inventory - SAP stock level change
- POST /webhooks/iot/temperature-alert - Zone temperature out of range
- POST /webhooks/powerbi/refresh-complete - Dataset refresh outcome
- POST /webhooks/shopify/orders/create - New Shopify order

Callers are vendors, not users: requests are authenticated by signature
and resolved to the account with the matching integration enabled.

Dependencies: scm_backend.application.services, scm_backend.models
System role: Webhook HTTP API
"""

from fastapi import APIRouter, Depends

from scm_backend.api.deps.dependencies import get_webhook_service, require_webhook_signature
from scm_backend.api.error_handling import handle_domain_errors
from scm_backend.application.services.webhook_service import WebhookService
from scm_backend.core.webhooks import SHOPIFY_SIGNATURE_HEADER
from scm_backend.models.webhooks import (
    IoTTemperatureAlertWebhook,
    PowerBiRefreshWebhook,
    SapInventoryWebhook,
    ShopifyOrderWebhook,
    WebhookAck,
)

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post(
    "/sap/inventory",
    response_model=WebhookAck,
    dependencies=[Depends(require_webhook_signature("sap"))],
)
@handle_domain_errors
async def sap_inventory(
    payload: SapInventoryWebhook,
    service: WebhookService = Depends(get_webhook_service),
) -> WebhookAck:
    """
    Raises:
        HTTPException(401): Invalid signature
        HTTPException(404): No SAP-enabled user or unknown SAP item
    """
    await service.handle_sap_inventory(payload)
    return WebhookAck()


@router.post(
    "/iot/temperature-alert",
    response_model=WebhookAck,
    dependencies=[Depends(require_webhook_signature("iot"))],
)
@handle_domain_errors
async def iot_temperature_alert(
    payload: IoTTemperatureAlertWebhook,
    service: WebhookService = Depends(get_webhook_service),
) -> WebhookAck:
    await service.handle_iot_temperature_alert(payload)
    return WebhookAck()


@router.post(
    "/powerbi/refresh-complete",
    response_model=WebhookAck,
    dependencies=[Depends(require_webhook_signature("power_bi"))],
)
@handle_domain_errors
async def power_bi_refresh_complete(
    payload: PowerBiRefreshWebhook,
    service: WebhookService = Depends(get_webhook_service),
) -> WebhookAck:
    await service.handle_power_bi_refresh(payload)
    return WebhookAck()


@router.post(
    "/shopify/orders/create",
    response_model=WebhookAck,
    dependencies=[
        Depends(require_webhook_signature("shopify", SHOPIFY_SIGNATURE_HEADER, "base64"))
    ],
)
@handle_domain_errors
async def shopify_order_created(
    payload: ShopifyOrderWebhook,
    service: WebhookService = Depends(get_webhook_service),
) -> WebhookAck:
    """Shopify signs the body with the app secret, base64-encoded."""
    await service.handle_shopify_order_created(payload)
    return WebhookAck()

import json
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from scm_backend.api.deps.dependencies import get_settings_dependency, get_webhook_service
from scm_backend.api.main import create_app
from scm_backend.configs import Settings, WebhookSettings
from scm_backend.core.exceptions import NotFoundError
from scm_backend.core.webhooks import sign

SAP_BODY = json.dumps({"sapItemId": "M-1", "quantity": 4}).encode()
SHOPIFY_BODY = json.dumps({"id": 1, "order_number": 1001, "total_price": "9.00", "line_items": []}).encode()


@pytest.fixture
def mock_service():
    return AsyncMock()


def _client(mock_service, **secrets) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_webhook_service] = lambda: mock_service
    app.dependency_overrides[get_settings_dependency] = lambda: Settings(webhooks=WebhookSettings(**secrets))
    return TestClient(app)


def test_sap_inventory_with_valid_signature(mock_service):
    client = _client(mock_service, sap_secret="s3cret")

    response = client.post(
        "/api/v1/webhooks/sap/inventory",
        content=SAP_BODY,
        headers={"Content-Type": "application/json", "X-Webhook-Signature": sign("s3cret", SAP_BODY)},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    payload = mock_service.handle_sap_inventory.await_args.args[0]
    assert (payload.sap_item_id, payload.quantity) == ("M-1", 4)


def test_invalid_signature_is_401(mock_service):
    client = _client(mock_service, sap_secret="s3cret")

    response = client.post(
        "/api/v1/webhooks/sap/inventory",
        content=SAP_BODY,
        headers={"Content-Type": "application/json", "X-Webhook-Signature": "bad"},
    )

    assert response.status_code == 401
    assert response.json()["detail"] == {"code": "INVALID_SIGNATURE", "message": "Invalid webhook signature"}
    mock_service.handle_sap_inventory.assert_not_awaited()


def test_unconfigured_secret_accepts_unsigned_requests(mock_service):
    client = _client(mock_service)

    response = client.post(
        "/api/v1/webhooks/powerbi/refresh-complete",
        json={"datasetId": "ds-1", "datasetName": "Sales", "status": "Completed"},
    )

    assert response.status_code == 200
    mock_service.handle_power_bi_refresh.assert_awaited_once()


def test_shopify_uses_base64_hmac_header(mock_service):
    client = _client(mock_service, shopify_secret="app-secret")

    response = client.post(
        "/api/v1/webhooks/shopify/orders/create",
        content=SHOPIFY_BODY,
        headers={
            "Content-Type": "application/json",
            "X-Shopify-Hmac-Sha256": sign("app-secret", SHOPIFY_BODY, "base64"),
        },
    )

    assert response.status_code == 200
    assert mock_service.handle_shopify_order_created.await_args.args[0].order_number == 1001


def test_missing_target_is_404(mock_service):
    mock_service.handle_iot_temperature_alert.side_effect = NotFoundError(
        "warehouse", "wh-9", message="Warehouse not found"
    )
    client = _client(mock_service)

    response = client.post(
        "/api/v1/webhooks/iot/temperature-alert",
        json={"sensorId": "s-1", "temperature": 9.5, "warehouseId": "wh-9",
              "zoneName": "Freezer", "alertType": "HIGH"},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == {"code": "NOT_FOUND", "message": "Warehouse not found"}

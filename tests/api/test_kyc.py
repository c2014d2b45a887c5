import uuid
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from scm_backend.api.deps.dependencies import get_current_user_id, get_kyc_service
from scm_backend.api.main import create_app
from scm_backend.boundary.db.models import KYCStatus, KYCSubmissionStatus, UserRole
from scm_backend.core.exceptions import (
    InvalidTransitionError,
    PermissionDeniedError,
    ValidationError,
)

USER_ID = str(uuid.uuid4())


@pytest.fixture
def mock_service():
    return AsyncMock()


@pytest.fixture
def client(mock_service):
    app = create_app()
    app.dependency_overrides[get_kyc_service] = lambda: mock_service
    app.dependency_overrides[get_current_user_id] = lambda: USER_ID
    return TestClient(app)


def _document():
    return SimpleNamespace(
        id=uuid.uuid4(),
        type="PASSPORT",
        url="https://files.example.com/p.pdf",
        status="PENDING",
        created_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
    )


def test_start_kyc(client, mock_service):
    mock_service.start.return_value = KYCStatus.IN_PROGRESS

    response = client.post("/api/v1/kyc/start")

    assert response.status_code == 200
    assert response.json()["status"] == "IN_PROGRESS"
    mock_service.start.assert_awaited_once_with(USER_ID)


def test_get_status_with_documents(client, mock_service):
    mock_service.get_status.return_value = (KYCStatus.IN_PROGRESS, [_document()])

    response = client.get("/api/v1/kyc/status")

    body = response.json()
    assert body["status"] == "IN_PROGRESS"
    assert body["documents"][0]["type"] == "PASSPORT"


def test_upload_document(client, mock_service):
    mock_service.upload_document.return_value = _document()

    response = client.post(
        "/api/v1/kyc/documents",
        json={"type": "PASSPORT", "url": "https://files.example.com/p.pdf"},
    )

    assert response.status_code == 201
    mock_service.upload_document.assert_awaited_once_with(
        USER_ID, "PASSPORT", "https://files.example.com/p.pdf"
    )


def test_submit_kyc(client, mock_service):
    mock_service.submit.return_value = {"status": "PENDING_REVIEW", "reference_id": "ref-1"}

    response = client.post(
        "/api/v1/kyc/submit",
        json={"full_name": "Ada", "date_of_birth": "1990-01-01", "address": "1 Main", "role": "supplier"},
    )

    assert response.status_code == 200
    assert response.json() == {"status": "PENDING_REVIEW", "reference_id": "ref-1"}
    payload = mock_service.submit.await_args.args[1]
    assert payload["full_name"] == "Ada"
    assert payload["company_name"] is None


def test_submit_without_documents_is_400(client, mock_service):
    mock_service.submit.side_effect = ValidationError(
        "Please upload required documents before submitting",
        field="documents",
        details={"code": "DOCUMENTS_REQUIRED"},
    )

    response = client.post("/api/v1/kyc/submit", json={})

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "DOCUMENTS_REQUIRED"


def test_submit_twice_is_409(client, mock_service):
    mock_service.submit.side_effect = InvalidTransitionError("kyc", "PENDING_REVIEW", "PENDING_REVIEW")

    response = client.post("/api/v1/kyc/submit", json={})

    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "INVALID_STATUS"


def test_verify_requires_admin(client, mock_service):
    mock_service.verify.side_effect = PermissionDeniedError()

    response = client.post(
        "/api/v1/admin/kyc/verify",
        json={"submission_id": str(uuid.uuid4()), "status": "APPROVED"},
    )

    assert response.status_code == 403
    assert response.json()["detail"]["message"] == "Admin access required"


def test_verify_submission(client, mock_service):
    submission_id = uuid.uuid4()
    mock_service.verify.return_value = "KYC submission approved successfully"

    response = client.post(
        "/api/v1/admin/kyc/verify",
        json={"submission_id": str(submission_id), "status": "REJECTED", "rejection_reason": "blurry"},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "KYC submission approved successfully"}
    mock_service.verify.assert_awaited_once_with(USER_ID, submission_id, "REJECTED", "blurry")


def test_verify_rejects_malformed_submission_id(client, mock_service):
    response = client.post("/api/v1/admin/kyc/verify", json={"submission_id": "nope", "status": "APPROVED"})
    assert response.status_code == 422


def test_get_document(client, mock_service):
    document = _document()
    mock_service.get_document.return_value = document

    response = client.get(f"/api/v1/kyc/documents/{document.id}")

    assert response.status_code == 200
    assert response.json()["url"] == "https://files.example.com/p.pdf"
    mock_service.get_document.assert_awaited_once_with(USER_ID, document.id)


def test_get_document_of_someone_else_is_403(client, mock_service):
    mock_service.get_document.side_effect = PermissionDeniedError("Access denied")

    response = client.get(f"/api/v1/kyc/documents/{uuid.uuid4()}")

    assert response.status_code == 403
    assert response.json()["detail"] == {"code": "FORBIDDEN", "message": "Access denied"}


def test_delete_document(client, mock_service):
    document_id = uuid.uuid4()

    response = client.delete(f"/api/v1/kyc/documents/{document_id}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Document deleted successfully"}
    mock_service.delete_document.assert_awaited_once_with(USER_ID, document_id)


def test_admin_list_submissions(client, mock_service):
    submission = SimpleNamespace(
        id=uuid.uuid4(),
        user_id=str(uuid.uuid4()),
        full_name="Ada Lovelace",
        status=KYCSubmissionStatus.PENDING,
        role=UserRole.SUPPLIER,
        created_at=datetime(2024, 3, 2, tzinfo=timezone.utc),
    )
    mock_service.list_submissions.return_value = ([(submission, [_document()])], 11)

    response = client.get("/api/v1/admin/kyc/list?page=2&limit=5")

    assert response.status_code == 200
    body = response.json()
    assert body["pagination"] == {"total": 11, "page": 2, "limit": 5, "pages": 3}
    assert body["submissions"][0]["full_name"] == "Ada Lovelace"
    assert body["submissions"][0]["role"] == "SUPPLIER"
    assert body["submissions"][0]["documents"][0]["type"] == "PASSPORT"
    mock_service.list_submissions.assert_awaited_once_with(USER_ID, status="PENDING", page=2, limit=5)


def test_admin_user_documents(client, mock_service):
    target = str(uuid.uuid4())
    mock_service.get_user_documents.return_value = [_document()]

    response = client.get(f"/api/v1/admin/kyc/documents/{target}")

    assert response.status_code == 200
    assert len(response.json()["documents"]) == 1
    mock_service.get_user_documents.assert_awaited_once_with(USER_ID, target)

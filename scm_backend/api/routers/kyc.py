"""
KYC API endpoints.

Routes:
- POST /kyc/start - Begin verification
- GET /kyc/status - Current status and uploaded documents
- POST /kyc/documents - Register an uploaded document
- GET /kyc/documents/{id} - One document (owner or admin)
- DELETE /kyc/documents/{id} - Remove a document (owner or admin)
- POST /kyc/submit - Submit details for review
- POST /admin/kyc/verify - Admin decision on a submission
- GET /admin/kyc/list - Paginated review queue
- GET /admin/kyc/documents/{user_id} - A user's documents

Dependencies: scm_backend.application.services, scm_backend.models
System role: KYC HTTP API
"""

import math
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from scm_backend.api.deps.dependencies import get_current_user_id, get_kyc_service
from scm_backend.api.error_handling import handle_domain_errors
from scm_backend.application.services.kyc_service import KYCService
from scm_backend.models.kyc import (
    KYCDocumentDeleteResponse,
    KYCDocumentListResponse,
    KYCDocumentRequest,
    KYCDocumentResponse,
    KYCStatusResponse,
    KYCSubmissionListResponse,
    KYCSubmissionSummary,
    KYCSubmitRequest,
    KYCSubmitResponse,
    KYCVerifyRequest,
    KYCVerifyResponse,
    Pagination,
)

router = APIRouter(prefix="/kyc", tags=["kyc"])
admin_router = APIRouter(prefix="/admin/kyc", tags=["admin"])


@router.post("/start", response_model=KYCStatusResponse)
@handle_domain_errors
async def start_kyc(
    user_id: str = Depends(get_current_user_id),
    service: KYCService = Depends(get_kyc_service),
) -> KYCStatusResponse:
    """Move the caller's KYC to IN_PROGRESS if it has not started yet."""
    status = await service.start(user_id)
    return KYCStatusResponse(status=status.value)


@router.get("/status", response_model=KYCStatusResponse)
@handle_domain_errors
async def get_kyc_status(
    user_id: str = Depends(get_current_user_id),
    service: KYCService = Depends(get_kyc_service),
) -> KYCStatusResponse:
    status, documents = await service.get_status(user_id)
    return KYCStatusResponse(
        status=status.value,
        documents=[KYCDocumentResponse.model_validate(d) for d in documents],
    )


@router.post("/documents", response_model=KYCDocumentResponse, status_code=201)
@handle_domain_errors
async def upload_document(
    request: KYCDocumentRequest,
    user_id: str = Depends(get_current_user_id),
    service: KYCService = Depends(get_kyc_service),
) -> KYCDocumentResponse:
    document = await service.upload_document(user_id, request.type, request.url)
    return KYCDocumentResponse.model_validate(document)


@router.get("/documents/{document_id}", response_model=KYCDocumentResponse)
@handle_domain_errors
async def get_document(
    document_id: UUID,
    user_id: str = Depends(get_current_user_id),
    service: KYCService = Depends(get_kyc_service),
) -> KYCDocumentResponse:
    """
    Raises:
        HTTPException(404): Document not found
        HTTPException(403): Caller is neither owner nor admin
    """
    document = await service.get_document(user_id, document_id)
    return KYCDocumentResponse.model_validate(document)


@router.delete("/documents/{document_id}", response_model=KYCDocumentDeleteResponse)
@handle_domain_errors
async def delete_document(
    document_id: UUID,
    user_id: str = Depends(get_current_user_id),
    service: KYCService = Depends(get_kyc_service),
) -> KYCDocumentDeleteResponse:
    await service.delete_document(user_id, document_id)
    return KYCDocumentDeleteResponse()


@router.post("/submit", response_model=KYCSubmitResponse)
@handle_domain_errors
async def submit_kyc(
    request: KYCSubmitRequest,
    user_id: str = Depends(get_current_user_id),
    service: KYCService = Depends(get_kyc_service),
) -> KYCSubmitResponse:
    """
    Submit KYC details for review.

    Raises:
        HTTPException(400): Missing fields or no documents uploaded
        HTTPException(409): Submission not allowed in the current status
    """
    result = await service.submit(user_id, request.model_dump())
    return KYCSubmitResponse(**result)


@admin_router.post("/verify", response_model=KYCVerifyResponse)
@handle_domain_errors
async def verify_kyc(
    request: KYCVerifyRequest,
    user_id: str = Depends(get_current_user_id),
    service: KYCService = Depends(get_kyc_service),
) -> KYCVerifyResponse:
    """
    Approve or reject a submission.

    Raises:
        HTTPException(403): Caller is not an admin
        HTTPException(400): Bad status or missing rejection reason
        HTTPException(404): Submission not found
    """
    message = await service.verify(
        user_id,
        request.submission_id,
        request.status,
        request.rejection_reason,
    )
    return KYCVerifyResponse(message=message)


@admin_router.get("/list", response_model=KYCSubmissionListResponse)
@handle_domain_errors
async def list_submissions(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    status: str = "PENDING",
    user_id: str = Depends(get_current_user_id),
    service: KYCService = Depends(get_kyc_service),
) -> KYCSubmissionListResponse:
    """
    Review queue for admins, newest first, each entry with its documents.

    Raises:
        HTTPException(403): Caller is not an admin
        HTTPException(400): Unknown status
    """
    items, total = await service.list_submissions(user_id, status=status, page=page, limit=limit)
    submissions = [
        KYCSubmissionSummary(
            id=submission.id,
            user_id=submission.user_id,
            full_name=submission.full_name,
            status=submission.status.value,
            role=submission.role.value,
            created_at=submission.created_at,
            documents=[KYCDocumentResponse.model_validate(d) for d in documents],
        )
        for submission, documents in items
    ]
    return KYCSubmissionListResponse(
        submissions=submissions,
        pagination=Pagination(total=total, page=page, limit=limit, pages=math.ceil(total / limit)),
    )


@admin_router.get("/documents/{target_user_id}", response_model=KYCDocumentListResponse)
@handle_domain_errors
async def get_user_documents(
    target_user_id: str,
    user_id: str = Depends(get_current_user_id),
    service: KYCService = Depends(get_kyc_service),
) -> KYCDocumentListResponse:
    documents = await service.get_user_documents(user_id, target_user_id)
    return KYCDocumentListResponse(
        documents=[KYCDocumentResponse.model_validate(d) for d in documents]
    )

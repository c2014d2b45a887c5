"""
KYC schemas.

Dependencies: pydantic
System role: KYC API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class KYCDocumentRequest(BaseModel):
    """Register an uploaded identity document."""

    type: str = Field(..., min_length=1, max_length=64, description="ID_CARD, PASSPORT, UTILITY_BILL, ...")
    url: str = Field(..., min_length=1, max_length=1024)


class KYCDocumentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    type: str
    url: str
    status: str
    created_at: datetime


class KYCSubmitRequest(BaseModel):
    """
    KYC submission payload.

    Required fields are validated by the KYC rules so the API can report
    INVALID_INPUT consistently for empty strings as well.
    """

    full_name: str = ""
    date_of_birth: str = ""
    address: str = ""
    role: str = ""
    company_name: str | None = None
    tax_id: str | None = None
    department: str | None = None
    employee_id: str | None = None
    team_size: str | None = None
    customer_type: str | None = None


class KYCSubmitResponse(BaseModel):
    status: str
    reference_id: str


class KYCStatusResponse(BaseModel):
    status: str
    documents: list[KYCDocumentResponse] = []


class KYCVerifyRequest(BaseModel):
    """Admin decision on a submission."""

    submission_id: uuid.UUID
    status: str
    rejection_reason: str | None = None


class KYCVerifyResponse(BaseModel):
    success: bool = True
    message: str


class KYCSubmissionSummary(BaseModel):
    """Submission row in the admin review queue."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: str
    full_name: str
    status: str
    role: str
    created_at: datetime
    documents: list[KYCDocumentResponse] = []


class Pagination(BaseModel):
    total: int
    page: int
    limit: int
    pages: int


class KYCSubmissionListResponse(BaseModel):
    submissions: list[KYCSubmissionSummary]
    pagination: Pagination


class KYCDocumentListResponse(BaseModel):
    documents: list[KYCDocumentResponse]


class KYCDocumentDeleteResponse(BaseModel):
    success: bool = True
    message: str = "Document deleted successfully"

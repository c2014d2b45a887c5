"""
KYC state machine.

User-level KYC status moves NOT_STARTED -> IN_PROGRESS -> PENDING_REVIEW
-> APPROVED | REJECTED. A rejected user may resubmit, either directly or
after restarting the flow.

Dependencies: scm_backend.boundary.db.models, scm_backend.core.exceptions
System role: KYC transition and submission rules
"""

from typing import Any

from scm_backend.boundary.db.models import KYCStatus, KYCSubmissionStatus
from scm_backend.core.exceptions import InvalidTransitionError, ValidationError

KYC_TRANSITIONS: dict[KYCStatus, frozenset[KYCStatus]] = {
    KYCStatus.NOT_STARTED: frozenset({KYCStatus.IN_PROGRESS}),
    KYCStatus.IN_PROGRESS: frozenset({KYCStatus.PENDING_REVIEW}),
    KYCStatus.PENDING_REVIEW: frozenset({KYCStatus.APPROVED, KYCStatus.REJECTED}),
    KYCStatus.REJECTED: frozenset({KYCStatus.IN_PROGRESS, KYCStatus.PENDING_REVIEW}),
    KYCStatus.APPROVED: frozenset(),
}

REQUIRED_SUBMISSION_FIELDS = ("full_name", "date_of_birth", "address", "role")

REVIEW_OUTCOMES = {
    KYCSubmissionStatus.APPROVED: KYCStatus.APPROVED,
    KYCSubmissionStatus.REJECTED: KYCStatus.REJECTED,
}


def can_transition(current: KYCStatus, target: KYCStatus) -> bool:
    return target in KYC_TRANSITIONS.get(current, frozenset())


def ensure_transition(current: KYCStatus, target: KYCStatus) -> None:
    """
    Raises:
        InvalidTransitionError: target is not reachable from current
    """
    if not can_transition(current, target):
        raise InvalidTransitionError("kyc", current.value, target.value)


def validate_submission(payload: dict[str, Any], document_count: int) -> None:
    """
    Check a submission before it is stored.

    Args:
        payload: Submission fields (snake_case)
        document_count: Documents already uploaded by the user

    Raises:
        ValidationError: A required field is empty (INVALID_INPUT) or no
            document was uploaded (DOCUMENTS_REQUIRED)
    """
    missing = [field for field in REQUIRED_SUBMISSION_FIELDS if not payload.get(field)]
    if missing:
        raise ValidationError(
            "All required fields must be provided",
            field=missing[0],
            details={"code": "INVALID_INPUT", "missing": missing},
        )
    if document_count == 0:
        raise ValidationError(
            "Please upload required documents before submitting",
            field="documents",
            details={"code": "DOCUMENTS_REQUIRED"},
        )


def resolve_review(status: str, rejection_reason: str | None) -> KYCSubmissionStatus:
    """
    Validate an admin decision.

    Returns:
        KYCSubmissionStatus: APPROVED or REJECTED

    Raises:
        ValidationError: Unknown status, or rejection without a reason
    """
    try:
        decision = KYCSubmissionStatus(status)
    except ValueError:
        decision = None
    if decision not in REVIEW_OUTCOMES:
        raise ValidationError(
            "Status must be either APPROVED or REJECTED",
            field="status",
            details={"code": "INVALID_STATUS"},
        )
    if decision is KYCSubmissionStatus.REJECTED and not rejection_reason:
        raise ValidationError(
            "Rejection reason is required when rejecting a submission",
            field="rejection_reason",
            details={"code": "INVALID_INPUT"},
        )
    return decision

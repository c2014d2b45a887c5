"""
Test suite for the KYC state machine and submission rules.

System role: Verification of pure KYC rules
"""

import pytest

from scm_backend.boundary.db.models import KYCStatus, KYCSubmissionStatus
from scm_backend.core import kyc
from scm_backend.core.exceptions import InvalidTransitionError, ValidationError

VALID_PAYLOAD = {
    "full_name": "Ada Lovelace",
    "date_of_birth": "1815-12-10",
    "address": "London",
    "role": "SUPPLIER",
}


class TestKycTransitions:
    """Test suite for can_transition / ensure_transition."""

    @pytest.mark.parametrize(
        "current,target",
        [
            (KYCStatus.NOT_STARTED, KYCStatus.IN_PROGRESS),
            (KYCStatus.IN_PROGRESS, KYCStatus.PENDING_REVIEW),
            (KYCStatus.PENDING_REVIEW, KYCStatus.APPROVED),
            (KYCStatus.PENDING_REVIEW, KYCStatus.REJECTED),
            (KYCStatus.REJECTED, KYCStatus.PENDING_REVIEW),
            (KYCStatus.REJECTED, KYCStatus.IN_PROGRESS),
        ],
    )
    def test_allowed(self, current, target) -> None:
        assert kyc.can_transition(current, target) is True
        kyc.ensure_transition(current, target)

    @pytest.mark.parametrize(
        "current,target",
        [
            (KYCStatus.NOT_STARTED, KYCStatus.PENDING_REVIEW),
            (KYCStatus.APPROVED, KYCStatus.PENDING_REVIEW),
            (KYCStatus.PENDING_REVIEW, KYCStatus.PENDING_REVIEW),
        ],
    )
    def test_rejected(self, current, target) -> None:
        assert kyc.can_transition(current, target) is False
        with pytest.raises(InvalidTransitionError):
            kyc.ensure_transition(current, target)


class TestValidateSubmission:
    """Test suite for validate_submission()."""

    def test_valid_payload_passes(self) -> None:
        kyc.validate_submission(VALID_PAYLOAD, document_count=1)

    def test_empty_required_field_is_invalid_input(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            kyc.validate_submission({**VALID_PAYLOAD, "address": ""}, document_count=1)

        assert exc_info.value.message == "All required fields must be provided"
        assert exc_info.value.details["code"] == "INVALID_INPUT"
        assert exc_info.value.details["missing"] == ["address"]

    def test_no_documents_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            kyc.validate_submission(VALID_PAYLOAD, document_count=0)

        assert exc_info.value.details["code"] == "DOCUMENTS_REQUIRED"


class TestResolveReview:
    """Test suite for resolve_review()."""

    def test_approve(self) -> None:
        assert kyc.resolve_review("APPROVED", None) is KYCSubmissionStatus.APPROVED

    def test_reject_requires_reason(self) -> None:
        with pytest.raises(ValidationError, match="Rejection reason is required"):
            kyc.resolve_review("REJECTED", "")

        assert kyc.resolve_review("REJECTED", "blurry scan") is KYCSubmissionStatus.REJECTED

    @pytest.mark.parametrize("status", ["PENDING", "approved", "maybe"])
    def test_other_statuses_are_invalid(self, status) -> None:
        with pytest.raises(ValidationError) as exc_info:
            kyc.resolve_review(status, None)

        assert exc_info.value.details["code"] == "INVALID_STATUS"

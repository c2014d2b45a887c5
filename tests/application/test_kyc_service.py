"""
Test suite for KYCService.

System role: Verification of the KYC flow against the database
"""

import uuid

import pytest

from scm_backend.application.services import KYCService
from scm_backend.boundary.db.CRUD import kyc_submission_crud, user_crud
from scm_backend.boundary.db.models import KYCStatus, KYCSubmissionStatus, UserRole
from scm_backend.core.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

PAYLOAD = {
    "full_name": "Ada Lovelace",
    "date_of_birth": "1815-12-10",
    "address": "London",
    "role": "supplier",
    "company_name": "Analytical Engines Ltd",
}


async def _submitted_user(make_user, service):
    user = await make_user()
    await service.start(user.id)
    await service.upload_document(user.id, "ID_CARD", "https://files.test/id.pdf")
    result = await service.submit(user.id, PAYLOAD)
    return user, result


class TestKycStart:
    async def test_start_moves_not_started_to_in_progress(self, make_user, test_async_db) -> None:
        user = await make_user()

        status = await KYCService(test_async_db).start(user.id)

        assert status is KYCStatus.IN_PROGRESS

    async def test_start_is_a_no_op_once_started(self, make_user, test_async_db) -> None:
        user = await make_user(kyc_status=KYCStatus.PENDING_REVIEW)

        status = await KYCService(test_async_db).start(user.id)

        assert status is KYCStatus.PENDING_REVIEW

    async def test_unknown_user_raises(self, test_async_db) -> None:
        with pytest.raises(NotFoundError):
            await KYCService(test_async_db).start(uuid.uuid4())


class TestKycSubmit:
    """Test suite for submit()."""

    async def test_submit_should_store_submission_and_move_to_pending_review(
        self, make_user, test_async_db
    ) -> None:
        # Arrange
        service = KYCService(test_async_db)

        # Act
        user, result = await _submitted_user(make_user, service)

        # Assert
        assert result["status"] == "PENDING_REVIEW"
        submission = await kyc_submission_crud.get_by_reference(test_async_db, result["reference_id"])
        assert submission.role is UserRole.SUPPLIER
        assert submission.status is KYCSubmissionStatus.PENDING
        status, documents = await service.get_status(user.id)
        assert status is KYCStatus.PENDING_REVIEW
        assert len(documents) == 1

    async def test_submit_without_documents_should_fail(self, make_user, test_async_db) -> None:
        user = await make_user(kyc_status=KYCStatus.IN_PROGRESS)

        with pytest.raises(ValidationError) as exc_info:
            await KYCService(test_async_db).submit(user.id, PAYLOAD)

        assert exc_info.value.details["code"] == "DOCUMENTS_REQUIRED"

    async def test_submit_with_unknown_role_should_fail(self, make_user, test_async_db) -> None:
        service = KYCService(test_async_db)
        user = await make_user(kyc_status=KYCStatus.IN_PROGRESS)
        await service.upload_document(user.id, "ID_CARD", "https://files.test/id.pdf")

        with pytest.raises(ValidationError, match="Invalid role"):
            await service.submit(user.id, {**PAYLOAD, "role": "pirate"})

    async def test_submit_before_start_should_be_rejected(self, make_user, test_async_db) -> None:
        service = KYCService(test_async_db)
        user = await make_user()
        await service.upload_document(user.id, "ID_CARD", "https://files.test/id.pdf")

        with pytest.raises(InvalidTransitionError):
            await service.submit(user.id, PAYLOAD)

    async def test_upload_requires_type_and_url(self, make_user, test_async_db) -> None:
        user = await make_user()

        with pytest.raises(ValidationError):
            await KYCService(test_async_db).upload_document(user.id, "", "https://files.test/x")


class TestKycVerify:
    """Test suite for verify()."""

    async def test_admin_approval_should_update_submission_and_user(
        self, make_user, test_async_db
    ) -> None:
        # Arrange
        service = KYCService(test_async_db)
        user, result = await _submitted_user(make_user, service)
        admin = await make_user(role=UserRole.ADMIN)
        submission = await kyc_submission_crud.get_by_reference(test_async_db, result["reference_id"])

        # Act
        message = await service.verify(admin.id, submission.id, "APPROVED")

        # Assert
        assert message == "KYC submission approved successfully"
        assert submission.status is KYCSubmissionStatus.APPROVED
        assert submission.reviewed_by == str(admin.id)
        assert (await user_crud.get_by_id(test_async_db, user.id)).kyc_status is KYCStatus.APPROVED

    async def test_rejection_should_store_reason(self, make_user, test_async_db) -> None:
        service = KYCService(test_async_db)
        user, result = await _submitted_user(make_user, service)
        admin = await make_user(role=UserRole.ADMIN)
        submission = await kyc_submission_crud.get_by_reference(test_async_db, result["reference_id"])

        message = await service.verify(admin.id, submission.id, "REJECTED", "blurry scan")

        assert message == "KYC submission rejected successfully"
        assert submission.rejection_reason == "blurry scan"
        assert (await user_crud.get_by_id(test_async_db, user.id)).kyc_status is KYCStatus.REJECTED

    async def test_rejected_user_may_resubmit(self, make_user, test_async_db) -> None:
        service = KYCService(test_async_db)
        user, result = await _submitted_user(make_user, service)
        admin = await make_user(role=UserRole.ADMIN)
        submission = await kyc_submission_crud.get_by_reference(test_async_db, result["reference_id"])
        await service.verify(admin.id, submission.id, "REJECTED", "blurry scan")

        again = await service.submit(user.id, PAYLOAD)

        assert again["status"] == "PENDING_REVIEW"
        assert again["reference_id"] != result["reference_id"]

    async def test_non_admin_should_be_denied(self, make_user, test_async_db) -> None:
        service = KYCService(test_async_db)
        _, result = await _submitted_user(make_user, service)
        reviewer = await make_user(role=UserRole.MANAGER)
        submission = await kyc_submission_crud.get_by_reference(test_async_db, result["reference_id"])

        with pytest.raises(PermissionDeniedError):
            await service.verify(reviewer.id, submission.id, "APPROVED")

    async def test_unknown_submission_should_raise_not_found(self, make_user, test_async_db) -> None:
        admin = await make_user(role=UserRole.ADMIN)

        with pytest.raises(NotFoundError):
            await KYCService(test_async_db).verify(admin.id, uuid.uuid4(), "APPROVED")


class TestKycReviewQueue:
    """Test suite for the admin listing operations."""

    async def test_list_submissions_should_page_pending_with_documents(
        self, make_user, test_async_db
    ) -> None:
        # Arrange
        service = KYCService(test_async_db)
        first, _ = await _submitted_user(make_user, service)
        second, _ = await _submitted_user(make_user, service)
        admin = await make_user(role=UserRole.ADMIN)

        # Act
        items, total = await service.list_submissions(admin.id, page=1, limit=1)

        # Assert
        assert total == 2
        assert len(items) == 1
        submission, documents = items[0]
        assert submission.user_id in {str(first.id), str(second.id)}
        assert [d.type for d in documents] == ["ID_CARD"]
        assert all(d.user_id == submission.user_id for d in documents)

    async def test_list_submissions_filters_by_status(self, make_user, test_async_db) -> None:
        service = KYCService(test_async_db)
        await _submitted_user(make_user, service)
        admin = await make_user(role=UserRole.ADMIN)

        items, total = await service.list_submissions(admin.id, status="APPROVED")

        assert (items, total) == ([], 0)

    async def test_list_submissions_rejects_unknown_status(self, make_user, test_async_db) -> None:
        admin = await make_user(role=UserRole.ADMIN)

        with pytest.raises(ValidationError, match="Invalid status"):
            await KYCService(test_async_db).list_submissions(admin.id, status="LOST")

    async def test_admin_listings_require_admin(self, make_user, test_async_db) -> None:
        service = KYCService(test_async_db)
        user = await make_user()

        with pytest.raises(PermissionDeniedError):
            await service.list_submissions(user.id)
        with pytest.raises(PermissionDeniedError):
            await service.get_user_documents(user.id, user.id)

    async def test_get_user_documents(self, make_user, test_async_db) -> None:
        service = KYCService(test_async_db)
        user = await make_user()
        await service.upload_document(user.id, "ID_CARD", "https://files.test/id.pdf")
        admin = await make_user(role=UserRole.ADMIN)

        documents = await service.get_user_documents(admin.id, user.id)

        assert [d.url for d in documents] == ["https://files.test/id.pdf"]


class TestKycDocumentAccess:
    """Test suite for get_document() and delete_document()."""

    async def test_owner_and_admin_can_read_others_cannot(self, make_user, test_async_db) -> None:
        # Arrange
        service = KYCService(test_async_db)
        owner = await make_user()
        stranger = await make_user()
        admin = await make_user(role=UserRole.ADMIN)
        document = await service.upload_document(owner.id, "PASSPORT", "https://files.test/p.pdf")

        # Act / Assert
        assert (await service.get_document(owner.id, document.id)).id == document.id
        assert (await service.get_document(admin.id, document.id)).id == document.id
        with pytest.raises(PermissionDeniedError, match="Access denied"):
            await service.get_document(stranger.id, document.id)

    async def test_delete_document(self, make_user, test_async_db) -> None:
        service = KYCService(test_async_db)
        owner = await make_user()
        document = await service.upload_document(owner.id, "PASSPORT", "https://files.test/p.pdf")

        await service.delete_document(owner.id, document.id)

        with pytest.raises(NotFoundError, match="Document not found"):
            await service.get_document(owner.id, document.id)

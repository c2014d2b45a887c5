"""
KYC service orchestrator.

Drives the per-user KYC flow: start, document upload, submission and
admin review. Status changes go through the KYC state machine.

Dependencies: scm_backend.core.kyc, scm_backend.boundary.db.CRUD
System role: KYC use case orchestration
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.boundary.db.CRUD import kyc_document_crud, kyc_submission_crud, user_crud
from scm_backend.boundary.db.models import (
    KYCDocumentModel,
    KYCStatus,
    KYCSubmissionModel,
    KYCSubmissionStatus,
    UserModel,
    UserRole,
)
from scm_backend.core import kyc
from scm_backend.core.exceptions import (
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class KYCService:
    """KYC service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize KYC service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_user(self, user_id: str | UUID) -> UserModel:
        try:
            user_uuid = user_id if isinstance(user_id, UUID) else UUID(str(user_id))
        except ValueError:
            raise NotFoundError("user", user_id)
        user = await user_crud.get_by_id(self.db, user_uuid)
        if user is None:
            raise NotFoundError("user", user_id)
        return user

    async def _require_admin(self, user_id: str | UUID) -> UserModel:
        user = await self._get_user(user_id)
        if user.role != UserRole.ADMIN:
            raise PermissionDeniedError("Admin access required")
        return user

    async def start(self, user_id: str | UUID) -> KYCStatus:
        """
        Begin KYC; only a user who has not started is moved to IN_PROGRESS.

        Returns:
            KYCStatus: The user's status after the call
        """
        user = await self._get_user(user_id)
        if user.kyc_status == KYCStatus.NOT_STARTED:
            user.kyc_status = KYCStatus.IN_PROGRESS
            await self.db.commit()
            logger.info("KYC started", extra={"user_id": str(user_id)})
        return user.kyc_status

    async def get_status(self, user_id: str | UUID) -> tuple[KYCStatus, Sequence[KYCDocumentModel]]:
        user = await self._get_user(user_id)
        documents = await kyc_document_crud.find_many(self.db, user_id=str(user.id))
        return user.kyc_status, documents

    async def upload_document(self, user_id: str | UUID, type: str, url: str) -> KYCDocumentModel:
        """
        Record an uploaded document for the user.

        Raises:
            ValidationError: Empty type or url
            NotFoundError: User does not exist
        """
        if not type or not url:
            raise ValidationError(
                "Document type and url are required",
                field="type" if not type else "url",
                details={"code": "INVALID_INPUT"},
            )
        user = await self._get_user(user_id)
        document = await kyc_document_crud.create(
            self.db, user_id=str(user.id), type=type, url=url, status="PENDING"
        )
        await self.db.commit()
        return document

    async def _get_accessible_document(
        self, user_id: str | UUID, document_id: UUID
    ) -> KYCDocumentModel:
        caller = await self._get_user(user_id)
        document = await kyc_document_crud.get_by_id(self.db, document_id)
        if document is None:
            raise NotFoundError("document", document_id, message="Document not found")
        if document.user_id != str(caller.id) and caller.role != UserRole.ADMIN:
            raise PermissionDeniedError("Access denied")
        return document

    async def get_document(self, user_id: str | UUID, document_id: UUID) -> KYCDocumentModel:
        """
        Fetch a document visible to the caller (its owner or an admin).

        Raises:
            NotFoundError: Document does not exist
            PermissionDeniedError: Caller is neither owner nor admin
        """
        return await self._get_accessible_document(user_id, document_id)

    async def delete_document(self, user_id: str | UUID, document_id: UUID) -> None:
        """
        Raises:
            NotFoundError: Document does not exist
            PermissionDeniedError: Caller is neither owner nor admin
        """
        await self._get_accessible_document(user_id, document_id)
        await kyc_document_crud.delete_by_id(self.db, document_id)
        await self.db.commit()
        logger.info("KYC document deleted", extra={"document_id": str(document_id)})

    async def submit(self, user_id: str | UUID, payload: dict[str, Any]) -> dict[str, str]:
        """
        Submit KYC details for review.

        Args:
            user_id: Submitting user
            payload: full_name, date_of_birth, address, role plus optional
                company/employee fields

        Returns:
            dict: {"status": "PENDING_REVIEW", "reference_id": ...}

        Raises:
            ValidationError: Missing fields, unknown role or no documents
            InvalidTransitionError: User is not allowed to submit now
            NotFoundError: User does not exist
        """
        user = await self._get_user(user_id)
        document_count = await kyc_document_crud.count_for_user(self.db, str(user.id))
        kyc.validate_submission(payload, document_count)

        try:
            role = UserRole(str(payload["role"]).upper())
        except ValueError:
            raise ValidationError(
                "Invalid role",
                field="role",
                details={"code": "INVALID_INPUT"},
            )

        kyc.ensure_transition(user.kyc_status, KYCStatus.PENDING_REVIEW)

        reference_id = str(uuid.uuid4())
        await kyc_submission_crud.create(
            self.db,
            user_id=str(user.id),
            reference_id=reference_id,
            full_name=payload["full_name"],
            date_of_birth=payload["date_of_birth"],
            address=payload["address"],
            role=role,
            company_name=payload.get("company_name"),
            tax_id=payload.get("tax_id"),
            department=payload.get("department"),
            employee_id=payload.get("employee_id"),
            team_size=payload.get("team_size"),
            customer_type=payload.get("customer_type"),
        )
        user.kyc_status = KYCStatus.PENDING_REVIEW
        await self.db.commit()

        logger.info(
            "KYC submitted",
            extra={"user_id": str(user.id), "reference_id": reference_id},
        )
        return {"status": KYCStatus.PENDING_REVIEW.value, "reference_id": reference_id}

    async def verify(
        self,
        admin_id: str | UUID,
        submission_id: UUID,
        status: str,
        rejection_reason: str | None = None,
    ) -> str:
        """
        Record an admin decision on a submission.

        The submission and the submitting user's status are committed
        together.

        Returns:
            str: Confirmation message

        Raises:
            PermissionDeniedError: Caller is not an admin
            ValidationError: Bad status or missing rejection reason
            NotFoundError: Submission does not exist
        """
        admin = await self._require_admin(admin_id)

        decision = kyc.resolve_review(status, rejection_reason)

        submission = await kyc_submission_crud.get_by_id(self.db, submission_id)
        if submission is None:
            raise NotFoundError("KYC submission", submission_id)

        try:
            submission.status = decision
            submission.reviewed_by = str(admin.id)
            submission.reviewed_at = datetime.now(timezone.utc)
            if decision.value == "REJECTED":
                submission.rejection_reason = rejection_reason

            user = await user_crud.get_by_id(self.db, UUID(submission.user_id))
            if user is not None:
                user.kyc_status = kyc.REVIEW_OUTCOMES[decision]
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "KYC verification failed",
                extra={"submission_id": str(submission_id), "error": str(e)},
            )
            raise

        logger.info(
            "KYC submission reviewed",
            extra={"submission_id": str(submission_id), "status": decision.value},
        )
        return f"KYC submission {decision.value.lower()} successfully"

    async def list_submissions(
        self,
        admin_id: str | UUID,
        status: str = "PENDING",
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[tuple[KYCSubmissionModel, Sequence[KYCDocumentModel]]], int]:
        """
        Page through submissions in a review status for admins.

        Each submission comes with the submitting user's documents.

        Returns:
            Tuple of ([(submission, documents)], total in that status)

        Raises:
            PermissionDeniedError: Caller is not an admin
            ValidationError: Unknown status
        """
        await self._require_admin(admin_id)
        try:
            review_status = KYCSubmissionStatus(status.upper())
        except ValueError:
            raise ValidationError(
                f"Invalid status: {status}",
                field="status",
                details={"code": "INVALID_INPUT"},
            )

        submissions, total = await kyc_submission_crud.list_by_status(
            self.db, review_status, offset=(page - 1) * limit, limit=limit
        )
        items = [
            (submission, await kyc_document_crud.get_by_user(self.db, submission.user_id))
            for submission in submissions
        ]
        return items, total

    async def get_user_documents(
        self, admin_id: str | UUID, user_id: str | UUID
    ) -> Sequence[KYCDocumentModel]:
        """
        Raises:
            PermissionDeniedError: Caller is not an admin
        """
        await self._require_admin(admin_id)
        return await kyc_document_crud.get_by_user(self.db, str(user_id))

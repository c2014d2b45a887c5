"""
KYC CRUD operations.

Dependencies: sqlalchemy, scm_backend.boundary.db.models
System role: KYC submission and document persistence
"""

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.boundary.db.CRUD.base_crud import BaseCRUD
from scm_backend.boundary.db.models.kyc_model import (
    KYCDocumentModel,
    KYCSubmissionModel,
    KYCSubmissionStatus,
)


class KYCSubmissionCRUD(BaseCRUD[KYCSubmissionModel]):
    """CRUD operations for KYCSubmissionModel."""

    def __init__(self) -> None:
        super().__init__(KYCSubmissionModel)

    async def get_by_reference(
        self,
        session: AsyncSession,
        reference_id: str,
    ) -> KYCSubmissionModel | None:
        """Retrieve submission by its public reference id."""
        stmt = select(KYCSubmissionModel).where(
            KYCSubmissionModel.reference_id == reference_id
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_status(
        self,
        session: AsyncSession,
        status: KYCSubmissionStatus,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[Sequence[KYCSubmissionModel], int]:
        """
        One page of submissions in a status, newest first.

        Returns:
            Tuple of (page of submissions, total number in that status)
        """
        stmt = (
            select(KYCSubmissionModel)
            .where(KYCSubmissionModel.status == status)
            .order_by(KYCSubmissionModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        count_stmt = (
            select(func.count())
            .select_from(KYCSubmissionModel)
            .where(KYCSubmissionModel.status == status)
        )
        submissions = (await session.execute(stmt)).scalars().all()
        total = (await session.execute(count_stmt)).scalar_one()
        return submissions, int(total)


class KYCDocumentCRUD(BaseCRUD[KYCDocumentModel]):
    """CRUD operations for KYCDocumentModel."""

    def __init__(self) -> None:
        super().__init__(KYCDocumentModel)

    async def count_for_user(self, session: AsyncSession, user_id: str) -> int:
        """Number of documents a user has uploaded."""
        stmt = (
            select(func.count())
            .select_from(KYCDocumentModel)
            .where(KYCDocumentModel.user_id == user_id)
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def get_by_user(self, session: AsyncSession, user_id: str) -> Sequence[KYCDocumentModel]:
        """A user's documents, newest first."""
        stmt = (
            select(KYCDocumentModel)
            .where(KYCDocumentModel.user_id == user_id)
            .order_by(KYCDocumentModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


kyc_submission_crud = KYCSubmissionCRUD()
kyc_document_crud = KYCDocumentCRUD()

"""
KYC ORM models.

Dependencies: sqlalchemy, scm_backend.boundary.db.base
System role: Identity verification submissions and uploaded documents
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from scm_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from scm_backend.boundary.db.models.user_model import UserRole


class KYCSubmissionStatus(str, enum.Enum):
    """Review outcome of a single submission."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class KYCSubmissionModel(Base, UUIDMixin, TimestampMixin):
    """
    KYC submission awaiting or after admin review.

    Attributes:
        reference_id: Public reference handed back to the submitter (unique)
        reviewed_by: Admin user id that made the decision
        rejection_reason: Required when status is REJECTED
    """

    __tablename__ = "kyc_submissions"

    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    reference_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_birth: Mapped[str] = mapped_column(String(32), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[UserRole] = mapped_column(Enum(UserRole, native_enum=False), nullable=False)
    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tax_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    department: Mapped[str | None] = mapped_column(String(128), nullable=True)
    employee_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    team_size: Mapped[str | None] = mapped_column(String(32), nullable=True)
    customer_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    status: Mapped[KYCSubmissionStatus] = mapped_column(
        Enum(KYCSubmissionStatus, native_enum=False),
        nullable=False,
        default=KYCSubmissionStatus.PENDING,
    )
    reviewed_by: Mapped[str | None] = mapped_column(String(64), nullable=True)
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    rejection_reason: Mapped[str | None] = mapped_column(Text, nullable=True)


class KYCDocumentModel(Base, UUIDMixin, TimestampMixin):
    """Uploaded identity document reference."""

    __tablename__ = "kyc_documents"

    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    url: Mapped[str] = mapped_column(String(1024), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="PENDING")

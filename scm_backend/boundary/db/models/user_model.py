"""
User ORM model.

Holds identity, role, KYC/onboarding status and the per-category
integration settings that drive the sync adapters.

Dependencies: sqlalchemy, scm_backend.boundary.db.base
System role: User persistence and integration configuration storage
"""

import enum

from sqlalchemy import JSON, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from scm_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class UserRole(str, enum.Enum):
    """Platform roles."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    SUPPLIER = "SUPPLIER"
    CUSTOMER = "CUSTOMER"
    EMPLOYEE = "EMPLOYEE"


class KYCStatus(str, enum.Enum):
    """
    Know-your-customer verification states.

    NOT_STARTED -> IN_PROGRESS -> PENDING_REVIEW -> APPROVED | REJECTED
    """

    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    PENDING_REVIEW = "PENDING_REVIEW"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class OnboardingStatus(str, enum.Enum):
    """Guided setup states."""

    PENDING = "PENDING"
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        email: Unique login email
        name: Display name
        role: Platform role enum
        kyc_status: Current KYC state
        onboarding_status: Current onboarding state
        integrations: JSON mapping of integration category to
            {"enabled", "service", "api_key", "store_url"}
        created_at: Row creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False),
        nullable=False,
        default=UserRole.CUSTOMER,
    )

    kyc_status: Mapped[KYCStatus] = mapped_column(
        Enum(KYCStatus, native_enum=False),
        nullable=False,
        default=KYCStatus.NOT_STARTED,
    )

    onboarding_status: Mapped[OnboardingStatus] = mapped_column(
        Enum(OnboardingStatus, native_enum=False),
        nullable=False,
        default=OnboardingStatus.NOT_STARTED,
    )

    integrations: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        doc="Integration settings keyed by category",
    )

"""
Onboarding ORM model.

Dependencies: sqlalchemy, scm_backend.boundary.db.base
System role: Per-user guided setup progress
"""

import enum
from datetime import datetime

from sqlalchemy import JSON, DateTime, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from scm_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from scm_backend.boundary.db.models.user_model import OnboardingStatus


class OnboardingStepStatus(str, enum.Enum):
    """Status of a single onboarding step."""

    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    SKIPPED = "SKIPPED"


class OnboardingModel(Base, UUIDMixin, TimestampMixin):
    """
    Onboarding progress ORM model (one row per user).

    Attributes:
        current_step: Index of the step the user is on
        steps: JSON list of {"id", "status", "data", "completed_at",
            "skipped_at", "skip_reason"}
        role_specific_data: Merged data captured across all steps
        completed_at: Set when the whole flow is completed
    """

    __tablename__ = "onboarding"

    user_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    status: Mapped[OnboardingStatus] = mapped_column(
        Enum(OnboardingStatus, native_enum=False),
        nullable=False,
        default=OnboardingStatus.IN_PROGRESS,
    )
    current_step: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    steps: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    role_specific_data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

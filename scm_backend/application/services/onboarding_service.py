"""
Onboarding service orchestrator.

Creates and advances the per-user onboarding progress and keeps the
user's onboarding status in step with it.

Dependencies: scm_backend.core.onboarding, scm_backend.boundary.db.CRUD
System role: Onboarding use case orchestration
"""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.boundary.db.CRUD import onboarding_crud, user_crud
from scm_backend.boundary.db.models import (
    OnboardingModel,
    OnboardingStatus,
    OnboardingStepStatus,
    UserModel,
)
from scm_backend.core import onboarding
from scm_backend.core.exceptions import InvalidTransitionError, NotFoundError

logger = logging.getLogger(__name__)


def progress_summary(progress: OnboardingModel) -> dict[str, Any]:
    """Client-facing view of an onboarding record."""
    return {
        "status": progress.status.value,
        "current_step": progress.current_step,
        "completed_steps": onboarding.completed_steps(progress.steps or []),
        "completed": progress.status == OnboardingStatus.COMPLETED,
        "steps": list(progress.steps or []),
        "role_specific_data": dict(progress.role_specific_data or {}),
    }


class OnboardingService:
    """Onboarding service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize onboarding service with async database session.

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

    async def _get_progress(self, user_id: str) -> OnboardingModel:
        progress = await onboarding_crud.find_one(self.db, user_id=user_id)
        if progress is None:
            raise NotFoundError("onboarding progress", user_id)
        return progress

    async def start(self, user_id: str | UUID) -> OnboardingModel:
        """
        Create onboarding progress, or resume the existing one.

        Raises:
            InvalidTransitionError: Onboarding was already completed
            NotFoundError: User does not exist
        """
        user = await self._get_user(user_id)
        progress = await onboarding_crud.find_one(self.db, user_id=str(user.id))

        if progress is not None:
            if progress.status == OnboardingStatus.COMPLETED:
                raise InvalidTransitionError(
                    "onboarding", OnboardingStatus.COMPLETED.value, OnboardingStatus.IN_PROGRESS.value
                )
            progress.status = OnboardingStatus.IN_PROGRESS
        else:
            progress = await onboarding_crud.create(
                self.db,
                user_id=str(user.id),
                status=OnboardingStatus.IN_PROGRESS,
                current_step=0,
                steps=onboarding.initial_steps(),
                role_specific_data={},
            )

        user.onboarding_status = OnboardingStatus.IN_PROGRESS
        await self.db.commit()
        logger.info("Onboarding started", extra={"user_id": str(user.id)})
        return progress

    async def get_progress(self, user_id: str | UUID) -> OnboardingModel:
        """
        Raises:
            NotFoundError: Onboarding was never started
        """
        return await self._get_progress(str(user_id))

    async def update_step(
        self,
        user_id: str | UUID,
        step_id: int,
        status: OnboardingStepStatus,
        data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Update one step and merge its data.

        Returns:
            dict: {"id", "status", "data"} of the updated step

        Raises:
            NotFoundError: Onboarding was never started
            InvalidTransitionError: Onboarding is already completed
            ValidationError: Invalid step id or skipping a mandatory step
        """
        progress = await self._get_progress(str(user_id))
        if progress.status == OnboardingStatus.COMPLETED:
            raise InvalidTransitionError(
                "onboarding", OnboardingStatus.COMPLETED.value, f"step {step_id} {status.value}"
            )

        steps, current_step, role_data = onboarding.apply_step_update(
            list(progress.steps or []),
            progress.current_step,
            dict(progress.role_specific_data or {}),
            step_id,
            status,
            data,
            datetime.now(timezone.utc),
        )
        progress.steps = steps
        progress.current_step = current_step
        progress.role_specific_data = role_data
        await self.db.commit()

        step = next(s for s in steps if s["id"] == step_id)
        return {"id": step_id, "status": step["status"], "data": step["data"]}

    async def complete(self, user_id: str | UUID) -> datetime | None:
        """
        Mark onboarding completed; repeated calls return the first timestamp.

        Raises:
            NotFoundError: User missing or onboarding never started
        """
        user = await self._get_user(user_id)
        progress = await self._get_progress(str(user.id))

        if progress.status == OnboardingStatus.COMPLETED:
            return progress.completed_at

        progress.status = OnboardingStatus.COMPLETED
        progress.completed_at = datetime.now(timezone.utc)
        user.onboarding_status = OnboardingStatus.COMPLETED
        await self.db.commit()

        logger.info("Onboarding completed", extra={"user_id": str(user.id)})
        return progress.completed_at

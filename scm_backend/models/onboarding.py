"""
Onboarding schemas.

Dependencies: pydantic
System role: Onboarding API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from scm_backend.boundary.db.models import OnboardingStepStatus


class OnboardingProgressResponse(BaseModel):
    """Progress summary of the caller's onboarding."""

    status: str
    current_step: int
    completed_steps: list[int]
    completed: bool
    steps: list[dict[str, Any]] = []
    role_specific_data: dict[str, Any] = {}


class UpdateStepRequest(BaseModel):
    status: OnboardingStepStatus
    data: dict[str, Any] = Field(default_factory=dict)


class StepResponse(BaseModel):
    id: int
    status: str
    data: dict[str, Any]


class CompleteOnboardingResponse(BaseModel):
    success: bool = True
    completed_at: datetime | None

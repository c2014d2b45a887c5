"""
Onboarding API endpoints.

Routes:
- POST /onboarding/start - Create (or return) the caller's progress
- GET /onboarding/progress - Progress summary
- PUT /onboarding/step/{step_id} - Update one step
- POST /onboarding/complete - Finish onboarding

Dependencies: scm_backend.application.services, scm_backend.models
System role: Guided setup HTTP API
"""

from fastapi import APIRouter, Depends

from scm_backend.api.deps.dependencies import get_current_user_id, get_onboarding_service
from scm_backend.api.error_handling import handle_domain_errors
from scm_backend.application.services.onboarding_service import (
    OnboardingService,
    progress_summary,
)
from scm_backend.models.onboarding import (
    CompleteOnboardingResponse,
    OnboardingProgressResponse,
    StepResponse,
    UpdateStepRequest,
)

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


@router.post("/start", response_model=OnboardingProgressResponse)
@handle_domain_errors
async def start_onboarding(
    user_id: str = Depends(get_current_user_id),
    service: OnboardingService = Depends(get_onboarding_service),
) -> OnboardingProgressResponse:
    """
    Raises:
        HTTPException(409): Onboarding already completed
    """
    progress = await service.start(user_id)
    return OnboardingProgressResponse(**progress_summary(progress))


@router.get("/progress", response_model=OnboardingProgressResponse)
@handle_domain_errors
async def get_progress(
    user_id: str = Depends(get_current_user_id),
    service: OnboardingService = Depends(get_onboarding_service),
) -> OnboardingProgressResponse:
    progress = await service.get_progress(user_id)
    return OnboardingProgressResponse(**progress_summary(progress))


@router.put("/step/{step_id}", response_model=StepResponse)
@handle_domain_errors
async def update_step(
    step_id: int,
    request: UpdateStepRequest,
    user_id: str = Depends(get_current_user_id),
    service: OnboardingService = Depends(get_onboarding_service),
) -> StepResponse:
    """
    Update one step; completing the current step advances progress.

    Raises:
        HTTPException(400): Invalid step id or skipping a mandatory step
        HTTPException(404): Onboarding not started
        HTTPException(409): Onboarding already completed
    """
    step = await service.update_step(user_id, step_id, request.status, request.data)
    return StepResponse(**step)


@router.post("/complete", response_model=CompleteOnboardingResponse)
@handle_domain_errors
async def complete_onboarding(
    user_id: str = Depends(get_current_user_id),
    service: OnboardingService = Depends(get_onboarding_service),
) -> CompleteOnboardingResponse:
    completed_at = await service.complete(user_id)
    return CompleteOnboardingResponse(completed_at=completed_at)

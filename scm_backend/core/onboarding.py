"""
Onboarding step rules.

Progress is a list of step dicts plus a current step index. Functions
here are pure: they return fresh lists/dicts so JSON columns register
the change when reassigned.

Dependencies: scm_backend.boundary.db.models, scm_backend.core.exceptions
System role: Guided setup progression rules
"""

from datetime import datetime
from typing import Any

from scm_backend.boundary.db.models import OnboardingStepStatus
from scm_backend.core.exceptions import ValidationError

STEP_DETAILS: list[dict[str, Any]] = [
    {"title": "Welcome to SupplyCycles", "skippable": False},
    {"title": "Complete Your Profile", "skippable": False},
    {"title": "Role Setup", "skippable": False},
    {"title": "Connect Your Services", "skippable": True},
    {"title": "Set Your Preferences", "skippable": True},
    {"title": "All Set!", "skippable": False},
]

MAX_STEPS = len(STEP_DETAILS)


def initial_steps() -> list[dict[str, Any]]:
    """Fresh step list; the first step starts in progress."""
    return [
        {
            "id": index,
            "title": detail["title"],
            "status": (
                OnboardingStepStatus.IN_PROGRESS.value
                if index == 0
                else OnboardingStepStatus.NOT_STARTED.value
            ),
            "data": {},
            "completed_at": None,
        }
        for index, detail in enumerate(STEP_DETAILS)
    ]


def completed_steps(steps: list[dict[str, Any]]) -> list[int]:
    return [
        step["id"] for step in steps if step.get("status") == OnboardingStepStatus.COMPLETED.value
    ]


def apply_step_update(
    steps: list[dict[str, Any]],
    current_step: int,
    role_specific_data: dict[str, Any],
    step_id: int,
    status: OnboardingStepStatus,
    data: dict[str, Any] | None,
    now: datetime,
) -> tuple[list[dict[str, Any]], int, dict[str, Any]]:
    """
    Apply one step update.

    Step data and role-specific data are merged (new keys win). Completing
    the current step advances current_step by one. Unknown step ids are
    appended.

    Args:
        steps: Existing step list
        current_step: Existing current step index
        role_specific_data: Existing merged data
        step_id: Step being updated
        status: New step status
        data: Data captured for the step
        now: Timestamp recorded on completion

    Returns:
        tuple: (steps, current_step, role_specific_data), all new objects

    Raises:
        ValidationError: Step id is negative, or a mandatory step is skipped
    """
    if step_id < 0:
        raise ValidationError("Invalid step id", field="step_id")
    if (
        status is OnboardingStepStatus.SKIPPED
        and step_id < MAX_STEPS
        and not STEP_DETAILS[step_id]["skippable"]
    ):
        raise ValidationError(
            f"Step {step_id} cannot be skipped",
            field="status",
            details={"code": "INVALID_STATUS"},
        )

    data = data or {}
    completed_at = now.isoformat() if status is OnboardingStepStatus.COMPLETED else None

    new_steps = [dict(step) for step in steps]
    for step in new_steps:
        if step["id"] == step_id:
            step["status"] = status.value
            step["data"] = {**(step.get("data") or {}), **data}
            step["completed_at"] = completed_at
            break
    else:
        new_steps.append(
            {
                "id": step_id,
                "title": None,
                "status": status.value,
                "data": dict(data),
                "completed_at": completed_at,
            }
        )

    if status is OnboardingStepStatus.COMPLETED and current_step == step_id:
        current_step = step_id + 1

    return new_steps, current_step, {**role_specific_data, **data}

"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_current_user_id,
    get_integration_manager,
    get_kyc_service,
    get_notification_service,
    get_onboarding_service,
    get_settings_dependency,
)

__all__ = [
    "get_current_user_id",
    "get_integration_manager",
    "get_kyc_service",
    "get_notification_service",
    "get_onboarding_service",
    "get_settings_dependency",
]

"""Service orchestrators."""

from .integration_manager import IntegrationManager
from .kyc_service import KYCService
from .notification_service import NotificationService
from .onboarding_service import OnboardingService
from .webhook_service import WebhookService

__all__ = [
    "IntegrationManager",
    "KYCService",
    "NotificationService",
    "OnboardingService",
    "WebhookService",
]

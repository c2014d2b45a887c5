"""API routers."""

from .health import router as health_router
from .integrations import router as integrations_router
from .kyc import admin_router as admin_kyc_router
from .kyc import router as kyc_router
from .notifications import router as notifications_router
from .onboarding import router as onboarding_router
from .webhooks import router as webhooks_router

__all__ = [
    "admin_kyc_router",
    "health_router",
    "integrations_router",
    "kyc_router",
    "notifications_router",
    "onboarding_router",
    "webhooks_router",
]

"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: scm_backend.configs, scm_backend.application, scm_backend.boundary
System role: DI container for service injection
"""

import logging
from functools import lru_cache
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.application.services import (
    IntegrationManager,
    KYCService,
    NotificationService,
    OnboardingService,
    WebhookService,
)
from scm_backend.boundary.db import get_async_db
from scm_backend.configs import Settings, get_settings
from scm_backend.core.webhooks import SIGNATURE_HEADER, verify_signature
from scm_backend.observability import set_request_user

logger = logging.getLogger(__name__)


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


async def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """
    Identify the caller from the X-User-Id header.

    Authentication is terminated upstream (gateway); this layer only
    requires a well-formed user id. The id is also put in the logging
    request context.

    Raises:
        HTTPException(401): Header missing or not a UUID
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "NO_TOKEN", "message": "Authentication required"},
        )
    try:
        user_id = str(UUID(x_user_id))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "INVALID_TOKEN", "message": "Invalid user identity"},
        )
    set_request_user(user_id)
    return user_id


def get_notification_service(db: AsyncSession = Depends(get_async_db)) -> NotificationService:
    """
    Get notification service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        NotificationService: Notification service instance
    """
    return NotificationService(db=db)


def get_integration_manager(
    db: AsyncSession = Depends(get_async_db),
    user_id: str = Depends(get_current_user_id),
) -> IntegrationManager:
    """
    Get integration manager bound to the caller.

    Args:
        db: Async database session (injected via Depends)
        user_id: Caller id (injected via Depends)

    Returns:
        IntegrationManager: Manager for the caller's integrations
    """
    return IntegrationManager(db=db, user_id=user_id)


def get_kyc_service(db: AsyncSession = Depends(get_async_db)) -> KYCService:
    """Get KYC service instance."""
    return KYCService(db=db)


def get_onboarding_service(db: AsyncSession = Depends(get_async_db)) -> OnboardingService:
    """Get onboarding service instance."""
    return OnboardingService(db=db)


def get_webhook_service(db: AsyncSession = Depends(get_async_db)) -> WebhookService:
    """Get webhook service instance."""
    return WebhookService(db=db)


def require_webhook_signature(vendor: str, header: str = SIGNATURE_HEADER, encoding: str = "hex"):
    """
    Build a dependency that authenticates a vendor webhook.

    The raw body is checked against the vendor's configured secret
    (settings.webhooks.<vendor>_secret) before the payload is parsed.

    Args:
        vendor: Secret name prefix (sap, iot, power_bi, shopify)
        header: Header carrying the signature
        encoding: "hex" or "base64" digest text

    Raises:
        HTTPException(401): Signature missing or wrong
    """

    async def verify(request: Request, settings: Settings = Depends(get_settings_dependency)) -> None:
        body = await request.body()
        secret = settings.webhooks.secret_for(vendor)
        if not verify_signature(secret, body, request.headers.get(header), encoding):
            logger.warning(f"{__name__}:verify - Rejected {vendor} webhook with invalid signature")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"code": "INVALID_SIGNATURE", "message": "Invalid webhook signature"},
            )

    return verify

"""
Core business logic module.

Contains the exception hierarchy, the integration adapter layer and the
KYC/onboarding rules. Nothing here knows about HTTP.
"""

from scm_backend.core.exceptions import (
    ApiError,
    IntegrationError,
    InvalidTransitionError,
    LogoutError,
    NotFoundError,
    PermissionDeniedError,
    SupplyChainException,
    UnsupportedIntegrationError,
    ValidationError,
    VendorApiError,
)

__all__ = [
    "SupplyChainException",
    "ValidationError",
    "NotFoundError",
    "PermissionDeniedError",
    "InvalidTransitionError",
    "IntegrationError",
    "UnsupportedIntegrationError",
    "VendorApiError",
    "ApiError",
    "LogoutError",
]

"""
Exception hierarchy for the supply-chain backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class SupplyChainException(Exception):
    """Base exception for all supply-chain backend errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(SupplyChainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(SupplyChainException):
    """Raised when a requested record does not exist."""

    def __init__(
        self,
        resource: str,
        resource_id: Any,
        details: dict[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            resource: Resource kind (user, notification, ...)
            resource_id: Identifier that was looked up
            details: Additional context
            message: Client-facing text replacing the default
        """
        details = details or {}
        details["resource_id"] = str(resource_id)
        self.resource = resource
        super().__init__(message or f"{resource.capitalize()} not found: {resource_id}", details)


class PermissionDeniedError(SupplyChainException):
    """Raised when the caller lacks the role required for an operation."""

    def __init__(self, message: str = "Admin access required") -> None:
        super().__init__(message)


class InvalidTransitionError(SupplyChainException):
    """Raised when a status change is not allowed by a state machine."""

    def __init__(self, entity: str, current: str, target: str) -> None:
        """
        Initialize invalid transition error.

        Args:
            entity: State machine name (kyc, onboarding)
            current: Current status value
            target: Requested status value
        """
        super().__init__(
            f"Invalid {entity} transition: {current} -> {target}",
            {"entity": entity, "current": current, "target": target},
        )


class IntegrationError(SupplyChainException):
    """Base exception for third-party integration failures."""

    def __init__(
        self,
        message: str,
        category: str | None = None,
        service: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize integration error.

        Args:
            message: Error message
            category: Integration category (erp_crm, bi_tools, iot, ecommerce)
            service: Vendor service identifier
            details: Additional context
        """
        details = details or {}
        if category:
            details["category"] = category
        if service:
            details["service"] = service
        super().__init__(message, details)


class UnsupportedIntegrationError(IntegrationError):
    """Raised when no adapter exists for a category/service pair."""

    def __init__(self, category: str, service: str) -> None:
        super().__init__(
            f"Unsupported integration: {category}/{service}",
            category=category,
            service=service,
        )

    def __str__(self) -> str:
        return self.message


class VendorApiError(IntegrationError):
    """Raised when a vendor API answers with a non-success status."""

    def __init__(self, vendor: str, status_code: int, body: str) -> None:
        """
        Initialize vendor API error.

        Args:
            vendor: Display name of the vendor (SAP, Power BI, ...)
            status_code: HTTP status code returned
            body: Raw response body text
        """
        self.vendor = vendor
        self.status_code = status_code
        self.body = body
        super().__init__(f"{vendor} API error ({status_code}): {body}")

    def __str__(self) -> str:
        return self.message


class ApiError(SupplyChainException):
    """Raised by the platform API client for failed requests."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        code: str | None = None,
    ) -> None:
        self.status = status
        self.code = code
        super().__init__(message)


class LogoutError(SupplyChainException):
    """Raised when the session cannot be recovered and tokens were cleared."""

    pass

"""
Domain error handling for API endpoints.

Routers wrap their handlers with `handle_domain_errors`, which maps the
domain exception hierarchy onto HTTP statuses with an ErrorDetail body
({"code", "message"}). A code carried in the exception's details (e.g.
DOCUMENTS_REQUIRED) wins over the status default.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from scm_backend.core.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
    SupplyChainException,
    ValidationError,
)
from scm_backend.models.common import ErrorDetail
from scm_backend.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Checked in order; first isinstance match wins
DOMAIN_ERROR_STATUS: list[tuple[type[SupplyChainException], int, str]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN, "FORBIDDEN"),
    (ValidationError, status.HTTP_400_BAD_REQUEST, "INVALID_INPUT"),
    (InvalidTransitionError, status.HTTP_409_CONFLICT, "INVALID_STATUS"),
]

SERVER_ERROR = ErrorDetail(
    code="SERVER_ERROR",
    message="An unexpected error occurred. Please try again later.",
)


def to_http_exception(exc: SupplyChainException) -> HTTPException | None:
    """HTTPException for a mapped domain error, None for anything unmapped."""
    for exc_type, status_code, default_code in DOMAIN_ERROR_STATUS:
        if isinstance(exc, exc_type):
            detail = ErrorDetail(code=exc.details.get("code", default_code), message=exc.message)
            return HTTPException(status_code=status_code, detail=detail.model_dump())
    return None


def handle_domain_errors(func: F) -> F:
    """
    Decorator transforming domain exceptions into HTTPExceptions.

    NotFoundError -> 404, PermissionDeniedError -> 403,
    ValidationError -> 400, InvalidTransitionError -> 409,
    anything else -> 500 with a generic message.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except HTTPException:
            raise
        except SupplyChainException as e:
            http_exc = to_http_exception(e)
            if http_exc is None:
                log_exception_with_context(logger, "Unmapped domain error", e, endpoint=func.__name__)
                raise HTTPException(status_code=500, detail=SERVER_ERROR.model_dump())
            log_with_context(
                logger,
                logging.WARNING,
                f"{func.__name__} rejected with {http_exc.status_code}",
                endpoint=func.__name__,
                error=str(e),
            )
            raise http_exc
        except Exception as e:
            log_exception_with_context(logger, "Unexpected failure in API operation", e, endpoint=func.__name__)
            raise HTTPException(status_code=500, detail=SERVER_ERROR.model_dump())

    return wrapper  # type: ignore

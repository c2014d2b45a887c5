"""
Request context for log records.

Holds the correlation ID and the authenticated user of the current
request in contextvars so they follow the request across awaits, and
exposes a logging filter that stamps both onto every record.

Dependencies: contextvars, logging (stdlib)
System role: Request tracing across service boundaries
"""

import logging
import uuid
from contextvars import ContextVar

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")
user_id_ctx: ContextVar[str] = ContextVar("user_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Set the request's correlation ID, generating one when the caller sent none.

    Returns:
        str: The correlation ID that was set
    """
    value = correlation_id or uuid.uuid4().hex
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    return correlation_id_ctx.get()


def set_request_user(user_id: str) -> None:
    user_id_ctx.set(user_id)


def get_request_user() -> str:
    return user_id_ctx.get()


def clear_correlation_id() -> None:
    """Reset both request context values."""
    correlation_id_ctx.set("")
    user_id_ctx.set("")


class RequestContextFilter(logging.Filter):
    """Adds correlation_id and user_id attributes ("-" when unset)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_ctx.get() or "-"
        record.user_id = user_id_ctx.get() or "-"
        return True

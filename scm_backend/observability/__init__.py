"""
Observability module.

Logging configuration, structured logging helpers and request context
(correlation ID and caller) tracking.
"""

from scm_backend.observability.correlation import (
    RequestContextFilter,
    clear_correlation_id,
    get_correlation_id,
    get_request_user,
    set_correlation_id,
    set_request_user,
)
from scm_backend.observability.logger import configure_logging

__all__ = [
    "RequestContextFilter",
    "configure_logging",
    "set_correlation_id",
    "get_correlation_id",
    "set_request_user",
    "get_request_user",
    "clear_correlation_id",
]

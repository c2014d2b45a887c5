"""
Request observability middleware.

CorrelationMiddleware must wrap RequestLoggingMiddleware so request log
lines carry the correlation id.

Dependencies: fastapi, starlette, scm_backend.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from scm_backend.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Polled by load balancers; logged at DEBUG to keep request logs readable
QUIET_PATH_SUFFIXES = ("/health", "/health/db")


def _status_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request on arrival and on completion with its duration."""

    async def dispatch(self, request: Request, call_next):
        method = request.method
        path = request.url.path
        quiet = path.endswith(QUIET_PATH_SUFFIXES)
        started = time.perf_counter()

        logger.log(
            logging.DEBUG if quiet else logging.INFO,
            f"{method} {path}",
            extra={
                "method": method,
                "path": path,
                "query_string": request.url.query or None,
                "client_host": request.client.host if request.client else None,
            },
        )

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - Exception",
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                    "error_type": type(e).__name__,
                },
            )
            raise

        level = _status_level(response.status_code)
        logger.log(
            logging.DEBUG if quiet and level == logging.INFO else level,
            f"{method} {path} - {response.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Adopts the caller's X-Correlation-ID (or mints one) and echoes it back."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response

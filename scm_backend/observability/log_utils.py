"""
Structured logging helpers.

Context values are flattened to short strings and credentials are
masked, since integration settings and platform tokens pass through the
same code paths that log.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

SENSITIVE_KEYS = frozenset(
    {"api_key", "access_token", "refresh_token", "token", "password", "authorization"}
)
MASK = "***"


def mask_secrets(value: Any) -> Any:
    """Return a copy of value with sensitive dict entries masked, recursively."""
    if isinstance(value, dict):
        return {
            k: (MASK if str(k).lower() in SENSITIVE_KEYS and v else mask_secrets(v))
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [mask_secrets(v) for v in value]
    return value


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Render a value for a log record.

    Collections are summarized by size; long strings are truncated.
    """
    if value is None:
        return "None"
    if isinstance(value, str):
        text = value
    elif isinstance(value, (list, tuple)):
        text = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        text = str(mask_secrets(value)) if len(value) <= 5 else f"dict({len(value)} keys)"
    else:
        try:
            text = str(value)
        except Exception as e:
            return f"<unloggable {type(e).__name__}>"

    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def _context(context: dict[str, Any]) -> dict[str, str]:
    return {
        key: (MASK if key.lower() in SENSITIVE_KEYS else safe_log_value(val))
        for key, val in context.items()
    }


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    """
    Log message with context passed as record extras.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Extra fields; sensitive keys are masked
    """
    logger.log(level, message, extra=_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """Log message with traceback, exception type and text added to the context."""
    extra = _context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = str(exc)
    logger.exception(message, extra=extra)

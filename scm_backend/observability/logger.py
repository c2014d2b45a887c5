"""
Logger configuration.

Single stdout handler whose format carries the request correlation ID
and caller, so sync and API logs from one request can be grepped together.

Dependencies: logging (stdlib), scm_backend.observability.correlation
System role: Centralized logging configuration
"""

import logging
import sys

from scm_backend.observability.correlation import RequestContextFilter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s user=%(user_id)s] %(message)s"

# Chatty at INFO; their request lines duplicate our own vendor client logs
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "tenacity")


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging. Safe to call more than once.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ...)
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

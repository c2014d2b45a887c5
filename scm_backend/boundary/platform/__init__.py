"""
Platform API client package.

Exports:
  - ApiClient: httpx client with token refresh and mock mode
  - TokenManager: In-memory access/refresh token store
  - ERROR_MESSAGES, MOCK_RESPONSES: Lookup tables
"""

from scm_backend.boundary.platform.api_client import ApiClient
from scm_backend.boundary.platform.error_messages import ERROR_MESSAGES, error_message_for
from scm_backend.boundary.platform.mock_responses import MOCK_RESPONSES, resolve_mock
from scm_backend.boundary.platform.token_manager import TokenManager

__all__ = [
    "ApiClient",
    "TokenManager",
    "ERROR_MESSAGES",
    "error_message_for",
    "MOCK_RESPONSES",
    "resolve_mock",
]

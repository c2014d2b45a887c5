"""
Access/refresh token holder for the platform API client.

Dependencies: None (stdlib base64/json)
System role: Credential store consulted on every platform request
"""

import base64
import json
import logging
import time
from typing import Any

logger = logging.getLogger(__name__)


class TokenManager:
    """In-memory token store with JWT payload inspection (no signature check)."""

    def __init__(self, access_token: str | None = None, refresh_token: str | None = None) -> None:
        self._access_token = access_token
        self._refresh_token = refresh_token

    def get_access_token(self) -> str | None:
        return self._access_token

    def get_refresh_token(self) -> str | None:
        return self._refresh_token

    def set_tokens(self, access_token: str, refresh_token: str | None) -> None:
        self._access_token = access_token
        self._refresh_token = refresh_token

    def clear_tokens(self) -> None:
        self._access_token = None
        self._refresh_token = None
        logger.info(f"{__name__}:clear_tokens - Tokens cleared")

    @staticmethod
    def decode_token(token: str | None) -> dict[str, Any] | None:
        """
        Decode the payload segment of a JWT.

        Returns:
            dict | None: Payload claims, None when the token is malformed
        """
        if not token:
            return None
        try:
            payload = token.split(".")[1]
            padded = payload + "=" * (-len(payload) % 4)
            decoded = json.loads(base64.urlsafe_b64decode(padded))
        except (IndexError, ValueError) as e:
            logger.warning(f"{__name__}:decode_token - Error decoding token: {e}")
            return None
        return decoded if isinstance(decoded, dict) else None

    def is_token_expired(self, token: str | None, now: float | None = None) -> bool:
        """Missing, undecodable or exp-less tokens count as expired."""
        decoded = self.decode_token(token)
        if not decoded or not decoded.get("exp"):
            return True
        try:
            return (now if now is not None else time.time()) >= float(decoded["exp"])
        except (TypeError, ValueError):
            return True

    def is_access_token_expired(self) -> bool:
        return self.is_token_expired(self._access_token)

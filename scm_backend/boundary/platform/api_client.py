"""
Platform API client.

Async JSON client for the platform's own REST API with bearer auth,
single-flight token refresh on 401, rate-limit and error-code mapping,
and a mock mode that answers from canned responses without network I/O.

Dependencies: httpx, scm_backend.boundary.platform.token_manager
System role: Outbound client used by jobs and scripts talking to the platform API
"""

import asyncio
import logging
from typing import Any

import httpx

from scm_backend.boundary.platform.error_messages import error_message_for
from scm_backend.boundary.platform.mock_responses import resolve_mock
from scm_backend.boundary.platform.token_manager import TokenManager
from scm_backend.configs.platform_api import PlatformApiSettings
from scm_backend.core.exceptions import ApiError, LogoutError

logger = logging.getLogger(__name__)

SESSION_EXPIRED = "Session expired, please log in again."


class ApiClient:
    """
    Platform REST client.

    Concurrent requests that hit 401 share one refresh call: the first
    caller refreshes under an asyncio.Lock, later callers see the access
    token changed and reuse it. Each request is retried at most once.
    """

    def __init__(
        self,
        base_url: str,
        token_manager: TokenManager | None = None,
        live: bool = True,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
        mock_delay: float = 0.0,
    ) -> None:
        """
        Initialize platform client.

        Args:
            base_url: API root (e.g. http://localhost:8000/api/v1)
            token_manager: Token store, a fresh one when omitted
            live: False routes every call to mock responses
            http_client: Optional shared httpx.AsyncClient
            timeout: Request timeout in seconds
            mock_delay: Artificial latency for mock responses (seconds)
        """
        self.base_url = base_url.rstrip("/")
        self.tokens = token_manager or TokenManager()
        self.live = live
        self.timeout = timeout
        self.mock_delay = mock_delay
        self._http_client = http_client
        self._owns_client = http_client is None
        self._refresh_lock = asyncio.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: PlatformApiSettings,
        token_manager: TokenManager | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "ApiClient":
        return cls(
            settings.base_url,
            token_manager=token_manager,
            live=settings.live,
            http_client=http_client,
            timeout=settings.timeout,
            mock_delay=settings.mock_delay,
        )

    def set_live_mode(self, value: bool) -> None:
        self.live = value

    def _client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
        return self._http_client

    async def aclose(self) -> None:
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def _send(
        self,
        method: str,
        url: str,
        data: Any = None,
        token: str | None = None,
    ) -> httpx.Response:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        try:
            return await self._client().request(
                method, f"{self.base_url}{url}", headers=headers, json=data
            )
        except httpx.HTTPError as e:
            logger.error(f"{__name__}:_send - {method} {url} failed: {e}")
            raise ApiError(f"Network error: {e}") from e

    async def _refresh_access_token(self, stale_token: str | None) -> str:
        """
        Obtain a fresh access token, refreshing at most once per expiry.

        Raises:
            LogoutError: No refresh token, or the refresh call failed
        """
        async with self._refresh_lock:
            current = self.tokens.get_access_token()
            if current and current != stale_token:
                return current

            refresh_token = self.tokens.get_refresh_token()
            if not refresh_token:
                self.tokens.clear_tokens()
                raise LogoutError("No refresh token available. Please log in again.")

            try:
                response = await self._send(
                    "POST", "/auth/refresh", {"refreshToken": refresh_token}
                )
                if response.is_error:
                    raise ApiError(error_message_for(_json_or_none(response)), response.status_code)
                payload = response.json()
                access_token = payload["accessToken"]
            except (ApiError, KeyError, TypeError, ValueError) as e:
                logger.warning(f"{__name__}:_refresh_access_token - Token refresh failed: {e}")
                self.tokens.clear_tokens()
                raise LogoutError(SESSION_EXPIRED) from e

            self.tokens.set_tokens(access_token, payload.get("refreshToken", refresh_token))
            logger.info(f"{__name__}:_refresh_access_token - Access token refreshed")
            return access_token

    async def request(self, method: str, url: str, data: Any = None, _retry: bool = False) -> Any:
        """
        Send a request and return the decoded JSON body.

        Raises:
            ApiError: Non-success response (429 maps to RATE_LIMIT)
            LogoutError: Session could not be recovered; tokens cleared
        """
        method = method.upper()
        if not self.live:
            return await self._mock_request(method, url, data)

        token = self.tokens.get_access_token()
        response = await self._send(method, url, data, token)

        if response.status_code == 401:
            if _retry:
                self.tokens.clear_tokens()
                raise LogoutError(SESSION_EXPIRED)
            await self._refresh_access_token(token)
            return await self.request(method, url, data, _retry=True)

        if response.status_code == 429:
            raise ApiError("Rate limit exceeded", 429, "RATE_LIMIT")

        body = _json_or_none(response)
        if response.is_error:
            code = body.get("code") if isinstance(body, dict) else None
            raise ApiError(error_message_for(body), response.status_code, code)
        return body

    async def _mock_request(self, method: str, url: str, data: Any) -> Any:
        if self.mock_delay:
            await asyncio.sleep(self.mock_delay)
        resolved = resolve_mock(method, url)
        if resolved is None:
            raise ApiError("Endpoint not found.", 404, "NOT_FOUND")
        handler, params = resolved
        return handler(data, **params)

    async def get(self, url: str) -> Any:
        return await self.request("GET", url)

    async def post(self, url: str, data: Any = None) -> Any:
        return await self.request("POST", url, data)

    async def put(self, url: str, data: Any = None) -> Any:
        return await self.request("PUT", url, data)

    async def delete(self, url: str) -> Any:
        return await self.request("DELETE", url)


def _json_or_none(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None

"""
Test suite for the platform ApiClient.

Covers bearer auth, single-flight token refresh on 401, session expiry,
error-code mapping and mock mode.

System role: Verification of the outbound platform API client
"""

import asyncio
import json

import httpx
import pytest

from scm_backend.boundary.platform import ApiClient, TokenManager
from scm_backend.core.exceptions import ApiError, LogoutError

BASE_URL = "https://platform.test/api/v1"


def _api(handler, tokens: TokenManager | None = None) -> ApiClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ApiClient(BASE_URL, token_manager=tokens or TokenManager("old", "refresh-1"), http_client=http)


class TestApiClientAuth:
    """Test suite for bearer auth and refresh handling."""

    async def test_request_should_send_access_token(self) -> None:
        # Arrange
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={"id": "user-1"})

        api = _api(handler)

        # Act
        body = await api.get("/users/me")

        # Assert
        assert body == {"id": "user-1"}
        assert seen["auth"] == "Bearer old"

    async def test_401_should_refresh_once_and_retry(self) -> None:
        # Arrange
        refresh_calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/auth/refresh"):
                refresh_calls.append(json.loads(request.content))
                return httpx.Response(200, json={"accessToken": "new", "refreshToken": "refresh-2"})
            if request.headers.get("Authorization") == "Bearer new":
                return httpx.Response(200, json={"ok": True})
            return httpx.Response(401, json={"code": "INVALID_TOKEN"})

        tokens = TokenManager("old", "refresh-1")
        api = _api(handler, tokens)

        # Act
        body = await api.get("/orders")

        # Assert
        assert body == {"ok": True}
        assert refresh_calls == [{"refreshToken": "refresh-1"}]
        assert tokens.get_access_token() == "new"
        assert tokens.get_refresh_token() == "refresh-2"

    async def test_concurrent_401s_should_share_one_refresh(self) -> None:
        # Arrange
        refresh_calls = []

        async def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/auth/refresh"):
                refresh_calls.append(request)
                await asyncio.sleep(0.01)
                return httpx.Response(200, json={"accessToken": "new", "refreshToken": "r2"})
            if request.headers.get("Authorization") == "Bearer new":
                return httpx.Response(200, json={"path": request.url.path})
            return httpx.Response(401)

        api = _api(handler)

        # Act
        results = await asyncio.gather(
            api.get("/orders"), api.get("/inventory"), api.get("/users/me")
        )

        # Assert
        assert len(refresh_calls) == 1
        assert [r["path"] for r in results] == [
            "/api/v1/orders",
            "/api/v1/inventory",
            "/api/v1/users/me",
        ]

    async def test_failed_refresh_should_clear_tokens_and_raise_logout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/auth/refresh"):
                return httpx.Response(401, json={"code": "INVALID_TOKEN"})
            return httpx.Response(401)

        tokens = TokenManager("old", "refresh-1")
        api = _api(handler, tokens)

        with pytest.raises(LogoutError, match="Session expired"):
            await api.get("/orders")

        assert tokens.get_access_token() is None
        assert tokens.get_refresh_token() is None

    async def test_missing_refresh_token_should_raise_logout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401)

        api = _api(handler, TokenManager("old", None))

        with pytest.raises(LogoutError, match="No refresh token available"):
            await api.get("/orders")

    async def test_second_401_after_refresh_should_logout(self) -> None:
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/auth/refresh"):
                return httpx.Response(200, json={"accessToken": "new"})
            return httpx.Response(401)

        tokens = TokenManager("old", "refresh-1")
        api = _api(handler, tokens)

        # Act / Assert
        with pytest.raises(LogoutError):
            await api.get("/orders")
        assert tokens.get_access_token() is None


class TestApiClientErrors:
    """Test suite for error mapping."""

    async def test_429_should_raise_rate_limit(self) -> None:
        api = _api(lambda request: httpx.Response(429))

        with pytest.raises(ApiError) as exc_info:
            await api.get("/orders")

        assert exc_info.value.status == 429
        assert exc_info.value.code == "RATE_LIMIT"
        assert exc_info.value.message == "Rate limit exceeded"

    async def test_error_code_should_map_to_friendly_message(self) -> None:
        api = _api(lambda request: httpx.Response(400, json={"code": "INVALID_EMAIL"}))

        with pytest.raises(ApiError) as exc_info:
            await api.post("/auth/register", {"email": "x"})

        assert exc_info.value.message == "Please enter a valid email address"
        assert exc_info.value.code == "INVALID_EMAIL"
        assert exc_info.value.status == 400

    async def test_error_without_body_should_use_server_error_message(self) -> None:
        api = _api(lambda request: httpx.Response(500))

        with pytest.raises(ApiError) as exc_info:
            await api.get("/orders")

        assert exc_info.value.message == "Something went wrong, please try again later"

    async def test_network_failure_should_raise_api_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused")

        api = _api(handler)

        with pytest.raises(ApiError, match="Network error"):
            await api.get("/orders")


class TestApiClientMockMode:
    """Test suite for canned responses."""

    async def test_mock_mode_should_not_touch_the_network(self) -> None:
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("network used in mock mode")

        api = _api(handler)
        api.set_live_mode(False)

        # Act
        result = await api.post("/kyc/submit", {"fullName": "A"})

        # Assert
        assert result == {"status": "PENDING_REVIEW", "referenceId": "kyc-ref-123"}

    async def test_mock_mode_should_resolve_path_parameters(self) -> None:
        api = ApiClient(BASE_URL, live=False)

        order = await api.get("/orders/2")
        step = await api.put("/onboarding/step/3", {"status": "SKIPPED"})

        assert order["orderNumber"] == "ORD67890"
        assert step == {"id": 3, "status": "SKIPPED", "data": {}}

    async def test_mock_mode_unknown_route_should_raise_not_found(self) -> None:
        api = ApiClient(BASE_URL, live=False)

        with pytest.raises(ApiError) as exc_info:
            await api.get("/does/not/exist")

        assert exc_info.value.status == 404
        assert exc_info.value.code == "NOT_FOUND"

"""
Base HTTP client for third-party vendor APIs.

Wraps httpx with JSON handling, vendor-specific auth headers and
tenacity retries for transient failures (transport errors, 429, 5xx).

Dependencies: httpx, tenacity, scm_backend.core.exceptions
System role: Shared transport for SAP, Power BI, IoT and Shopify clients
"""

import logging
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from scm_backend.core.exceptions import VendorApiError

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def is_retryable(exc: BaseException) -> bool:
    """
    Decide whether a failed vendor call should be attempted again.

    Args:
        exc: Exception raised by the attempt

    Returns:
        bool: True for transport failures and throttling/server errors
    """
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, VendorApiError):
        return exc.status_code in RETRYABLE_STATUS_CODES
    return False


class VendorApiClient:
    """
    Generic JSON-over-HTTP vendor client.

    Subclasses set vendor_name and override _headers() when the vendor
    does not use bearer tokens. An httpx.AsyncClient may be injected
    (tests use httpx.MockTransport); otherwise a short-lived client is
    opened per request.
    """

    vendor_name = "Vendor"
    status_endpoint = "/system/status"

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_wait: float = 0.5,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize vendor client.

        Args:
            api_key: Vendor credential sent with every request
            base_url: API root, endpoints are appended verbatim
            timeout: Request timeout in seconds
            max_retries: Total attempts for retryable failures
            retry_wait: Initial backoff in seconds (0 disables waiting)
            http_client: Optional shared httpx.AsyncClient
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/") if base_url else ""
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_wait = retry_wait
        self._http_client = http_client

    def _headers(self) -> dict[str, str]:
        """Auth and content headers for every request."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.request(method, url, **kwargs)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.request(method, url, **kwargs)

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        data: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Perform a vendor API call and return the decoded JSON body.

        Args:
            endpoint: Path appended to base_url (e.g. "/orders")
            method: HTTP method
            data: JSON-serializable request body
            params: Query string parameters

        Returns:
            Parsed JSON response

        Raises:
            VendorApiError: Vendor answered with a non-2xx status
            httpx.TransportError: Network failure after all retries
        """
        url = f"{self.base_url}{endpoint}"

        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception(is_retryable),
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential_jitter(
                    initial=self.retry_wait,
                    max=self.retry_wait * 20,
                    jitter=self.retry_wait,
                ),
                before_sleep=lambda retry_state: logger.warning(
                    f"{__name__}:request - {self.vendor_name} retry "
                    f"{retry_state.attempt_number}/{self.max_retries} for {method} {endpoint}"
                ),
                reraise=True,
            ):
                with attempt:
                    response = await self._send(
                        method,
                        url,
                        headers=self._headers(),
                        json=data,
                        params=params,
                    )
                    if response.is_error:
                        raise VendorApiError(
                            self.vendor_name, response.status_code, response.text
                        )
                    return response.json()
        except Exception as e:
            logger.error(f"{__name__}:request - {self.vendor_name} API request failed: {e}")
            raise

    async def test_connection(self) -> bool:
        """
        Probe the vendor status endpoint.

        Returns:
            bool: True when the request succeeded; never raises
        """
        try:
            await self.request(self.status_endpoint)
            return True
        except Exception as e:
            logger.error(f"{__name__}:test_connection - {self.vendor_name} connection test failed: {e}")
            return False

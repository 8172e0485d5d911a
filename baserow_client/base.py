"""Base HTTP client for the Baserow REST API."""

import asyncio
from typing import Any

import httpx
from loguru import logger

from baserow_client.errors import RemoteStoreError

# Default settings
API_BASE_URL = "https://baserow.becoming-more.com"
API_TOKEN = ""
API_AUTH_SCHEME = "Token"
API_TIMEOUT = 30.0


def set_api_config(
    base_url: str,
    token: str,
    timeout: float,
    auth_scheme: str = "Token",
) -> None:
    """Set API configuration."""
    global API_BASE_URL, API_TOKEN, API_TIMEOUT, API_AUTH_SCHEME
    API_BASE_URL = base_url.rstrip("/")
    API_TOKEN = token
    API_TIMEOUT = timeout
    API_AUTH_SCHEME = auth_scheme


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    return isinstance(exc, RemoteStoreError) and exc.retryable


class BaseClient:
    """Base async HTTP client with a bounded number of in-flight requests.

    Use as an async context manager; the underlying connection pool lives
    between ``__aenter__`` and ``__aexit__``. ``transport`` replaces the
    network layer (tests pass an ``httpx.MockTransport``).
    """

    def __init__(
        self,
        max_concurrent: int = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._transport = transport
        self._request_count = 0
        logger.info("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=API_BASE_URL,
            headers={
                "Authorization": f"{API_AUTH_SCHEME} {API_TOKEN}",
                "Content-Type": "application/json",
            },
            timeout=API_TIMEOUT,
            limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.info("{}: total API requests: {}", self.__class__.__name__, self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def request_count(self) -> int:
        return self._request_count

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and decode the JSON body, raising RemoteStoreError on failure."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} must be used inside 'async with'")

        async with self._sem:
            self._request_count += 1
            try:
                resp = await self._client.request(method, path, params=params, json=json)
            except httpx.TimeoutException as e:
                raise RemoteStoreError(f"{method} {path} timed out") from e
            except httpx.TransportError as e:
                raise RemoteStoreError(f"{method} {path} failed: {e}") from e

        if resp.is_error:
            logger.debug("{} {} -> {}: {}", method, path, resp.status_code, resp.text[:200])
            raise RemoteStoreError(
                f"{method} {path} failed: {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise RemoteStoreError(f"{method} {path} returned invalid JSON", status_code=resp.status_code) from e

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET request."""
        return await self._request("GET", path, params=params)

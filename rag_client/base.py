"""Base HTTP client with retry logic."""

import asyncio

import httpx
from loguru import logger
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
)


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors, 429 and 5xx)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        return status == 429 or status >= 500
    return False


class BaseClient:
    """Base async JSON client with a concurrency cap and exponential backoff."""

    def __init__(self, base_url: str, api_key: str = "", timeout: float = 60, max_concurrent: int = 5):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.info("{}: {} max_concurrent={}", self.__class__.__name__, self._base_url, max_concurrent)

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def __aenter__(self):
        self._client = httpx.AsyncClient(timeout=self._timeout, headers=self._headers())
        return self

    async def __aexit__(self, *_):
        logger.debug("{}: {} requests", self.__class__.__name__, self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=_is_retryable_error,
        reraise=True,
    )
    async def _post(self, path: str, payload: dict) -> dict | list:
        """POST JSON with retry logic."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} used outside 'async with'")
        async with self._sem:
            self._request_count += 1
            resp = await self._client.post(f"{self._base_url}/{path.lstrip('/')}", json=payload)
            resp.raise_for_status()
            return resp.json()

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import Any, Self

import httpx

from reqres_client.retry import default_http_retry

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://reqres.in/api/"
_DEFAULT_RETRY = default_http_retry("reqres_api")


class ReqResTransport:
    """HTTP GET against the ReqRes base URL with transient-fault retry.

    Each ``get`` call is retried by *retry* on network faults, 408, 429 and
    5xx. Non-transient error statuses raise ``httpx.HTTPStatusError``
    immediately.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        client: httpx.AsyncClient | None = None,
        retry: Callable[..., Callable[..., Any]] = _DEFAULT_RETRY,
        *,
        timeout: float = 10.0,
        connect_timeout: float = 5.0,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
        )
        if not str(self._client.base_url):
            self._client.base_url = httpx.URL(base_url)
        self._get_with_retry = retry(self._do_get)

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    async def get(self, path: str) -> httpx.Response:
        """GET *path* relative to the base URL, returning a 2xx response."""
        return await self._get_with_retry(path)

    async def _do_get(self, path: str) -> httpx.Response:
        logger.debug("GET %s%s", self._client.base_url, path)
        response = await self._client.get(path)
        logger.debug("ReqRes API responded %d for %s", response.status_code, path)
        response.raise_for_status()
        return response

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

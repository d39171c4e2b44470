"""Wiring for the user service and its collaborators."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from reqres_client.cache.memory_store import MemoryCacheStore
from reqres_client.client import ReqResApiClient
from reqres_client.config import create_config, load_api_options, load_cache_options
from reqres_client.retry import default_http_retry
from reqres_client.service import UserService
from reqres_client.transport import ReqResTransport

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    import httpx

    from reqres_client.cache.protocol import CacheStore
    from reqres_client.config import AppConfig

logger = logging.getLogger(__name__)


@asynccontextmanager
async def user_service_session(
    cfg: AppConfig | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    cache: CacheStore | None = None,
) -> AsyncIterator[UserService]:
    """Build a UserService for the lifetime of the ``async with`` block.

    On exit the transport is closed and the cache is cleared. Pass *client*
    or *cache* to substitute collaborators, e.g. in tests.
    """
    if cfg is None:
        cfg = create_config()
    api_options = load_api_options(cfg)
    cache_options = load_cache_options(cfg)

    retry = default_http_retry(
        "reqres_api",
        max_attempts=api_options.max_attempts,
        backoff_base=api_options.backoff_base,
    )
    transport = ReqResTransport(
        api_options.base_url,
        client=client,
        retry=retry,
        timeout=api_options.timeout,
        connect_timeout=api_options.connect_timeout,
    )
    store = cache if cache is not None else MemoryCacheStore()
    service = UserService(
        ReqResApiClient(transport),
        store,
        user_ttl_seconds=cache_options.user_ttl,
        all_users_ttl_seconds=cache_options.all_users_ttl,
    )
    logger.debug("User service ready against %s", transport.base_url)
    try:
        yield service
    finally:
        await transport.aclose()
        store.clear()

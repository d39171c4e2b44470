"""Read-through cache in front of the ReqRes API client.

Usage:
    service = UserService(api, MemoryCacheStore())
    user = await service.get_user_by_id(2)      # fetched, cached for 5 minutes
    user = await service.get_user_by_id(2)      # served from cache
    users = await service.get_all_users()       # fetched, cached for 10 minutes

Absent users and empty listings are never cached, so they are fetched again
on the next call. Concurrent misses for the same key may each reach the API.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, cast

if TYPE_CHECKING:
    from reqres_client.cache.protocol import CacheStore
    from reqres_client.models import User

logger = logging.getLogger(__name__)

USER_CACHE_KEY_PREFIX = "User_"
ALL_USERS_CACHE_KEY = "AllUsers"
USER_TTL_SECONDS = 5 * 60
ALL_USERS_TTL_SECONDS = 10 * 60


class UserSource(Protocol):
    """The lookups the service delegates to on a cache miss."""

    async def get_user_by_id(self, user_id: int) -> User | None: ...

    async def get_all_users(self) -> list[User]: ...

    async def get_users(self, page: int = 1) -> list[User]: ...


def user_cache_key(user_id: int) -> str:
    return f"{USER_CACHE_KEY_PREFIX}{user_id}"


class UserService:
    def __init__(
        self,
        api: UserSource,
        cache: CacheStore,
        *,
        user_ttl_seconds: float = USER_TTL_SECONDS,
        all_users_ttl_seconds: float = ALL_USERS_TTL_SECONDS,
    ) -> None:
        self._api = api
        self._cache = cache
        self._user_ttl = user_ttl_seconds
        self._all_users_ttl = all_users_ttl_seconds

    async def get_user_by_id(self, user_id: int) -> User | None:
        cache_key = user_cache_key(user_id)
        cached = self._cache.get(cache_key)
        if cached is not None:
            logger.info("Retrieved user ID %d from cache", user_id)
            return cast("User", cached)

        logger.info("Getting user ID %d from API", user_id)
        user = await self._api.get_user_by_id(user_id)
        if user is None:
            logger.warning("User ID %d not found or API error occurred", user_id)
            return None

        self._cache.put(cache_key, user, self._user_ttl)
        logger.info("Cached user ID %d for %ds", user_id, self._user_ttl)
        return user

    async def get_all_users(self) -> list[User]:
        cached = self._cache.get(ALL_USERS_CACHE_KEY)
        if cached is not None:
            cached_users = cast("tuple[User, ...]", cached)
            logger.info("Retrieved all users from cache, count: %d", len(cached_users))
            return list(cached_users)

        logger.info("Getting all users from API")
        users = await self._api.get_all_users()
        if not users:
            # No users and total failure look the same here; neither is cached.
            logger.warning("No users retrieved from API or an error occurred while fetching all users")
            return []

        # Stored as a tuple; each caller gets its own list.
        self._cache.put(ALL_USERS_CACHE_KEY, tuple(users), self._all_users_ttl)
        logger.info("Cached %d users for %ds", len(users), self._all_users_ttl)
        return list(users)

    async def get_users(self, page: int = 1) -> list[User]:
        """Fetch one page of users. Not cached."""
        return await self._api.get_users(page)

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from reqres_client.aggregator import collect_all_pages
from reqres_client.errors import DecodeError, FetchError, TransportError, UnexpectedError
from reqres_client.models import decode_page, decode_single_user
from reqres_client.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from reqres_client.models import Page, User
    from reqres_client.result import Result
    from reqres_client.transport import ReqResTransport

logger = logging.getLogger(__name__)


class ReqResApiClient:
    """Client for the ReqRes ``users`` resource.

    ``fetch_*`` methods make a single attempt at this layer and report
    failures as ``Err(FetchError)``. ``get_*`` methods log those failures and
    degrade to None or an empty list; they never raise for a failed fetch.
    """

    def __init__(self, transport: ReqResTransport) -> None:
        self._transport = transport

    async def fetch_page(self, page: int) -> Result[Page, FetchError]:
        return await self._fetch(f"users?page={page}", decode_page)

    async def fetch_user(self, user_id: int) -> Result[User | None, FetchError]:
        return await self._fetch(f"users/{user_id}", decode_single_user)

    async def get_user_by_id(self, user_id: int) -> User | None:
        logger.info("Fetching user with ID: %d", user_id)
        result = await self.fetch_user(user_id)
        if result.is_err():
            _log_fetch_error(result.unwrap_err(), f"user ID {user_id}")
            return None
        return result.unwrap()

    async def get_users(self, page: int = 1) -> list[User]:
        """Fetch a single page of users. Pages below 1 are clamped to 1."""
        page = max(page, 1)
        logger.info("Fetching users on page: %d", page)
        result = await self.fetch_page(page)
        if result.is_err():
            _log_fetch_error(result.unwrap_err(), f"users page {page}")
            return []
        users = result.unwrap().users
        if users is None:
            logger.warning("API response for page %d contained no data", page)
            return []
        return list(users)

    async def get_all_users(self) -> list[User]:
        return await collect_all_pages(self)

    async def _fetch[T](self, path: str, decode: Callable[[Any], T]) -> Result[T, FetchError]:
        try:
            response = await self._transport.get(path)
            return Ok(decode(response.json()))
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            return Err(TransportError(f"GET {path} returned {status}", status_code=status, cause=e))
        except httpx.HTTPError as e:
            return Err(TransportError(f"GET {path} failed", cause=e))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(DecodeError(f"Malformed JSON from {path}", cause=e))
        except DecodeError as e:
            return Err(DecodeError(f"Unexpected response shape from {path}", cause=e))
        except Exception as e:
            return Err(UnexpectedError(f"Unexpected failure fetching {path}", cause=e))


def _log_fetch_error(error: FetchError, context: str) -> None:
    if isinstance(error, TransportError):
        logger.error("HTTP request failed for %s (status %s): %s", context, error.status_code, error)
    elif isinstance(error, DecodeError):
        logger.error("JSON deserialization failed for %s: %s", context, error)
    else:
        logger.error("An unexpected error occurred while fetching %s: %s", context, error)

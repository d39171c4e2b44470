"""Fetch-all pagination loop.

Pages are fetched strictly in order: the total page count is only known once
a page has been decoded. The loop stops at the first failed or data-less page
and returns whatever was accumulated before it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from reqres_client.errors import FetchError
    from reqres_client.models import Page, User
    from reqres_client.result import Result

logger = logging.getLogger(__name__)


class PageFetcher(Protocol):
    """Anything that can fetch one page of users in a single attempt."""

    async def fetch_page(self, page: int) -> Result[Page, FetchError]: ...


async def collect_all_pages(fetcher: PageFetcher) -> list[User]:
    """Walk pages 1..total_pages and return every user found.

    Never raises for a failed fetch; a failure on page *n* returns the users
    from pages 1..n-1.
    """
    logger.info("Fetching all users across all pages")
    users: list[User] = []
    current_page = 1
    total_pages = 1

    while current_page <= total_pages:
        result = await fetcher.fetch_page(current_page)
        if result.is_err():
            logger.error(
                "Fetch failed while collecting all users on page %d: %s", current_page, result.unwrap_err()
            )
            break

        page = result.unwrap()
        if page.users is None:
            logger.warning("API response for page %d contained no data", current_page)
            break

        users.extend(page.users)
        total_pages = page.total_pages
        logger.info("Fetched page %d/%d, users found: %d", current_page, total_pages, len(page.users))
        current_page += 1

    logger.info("Finished fetching all users, total collected: %d", len(users))
    return users

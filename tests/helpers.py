from collections.abc import Callable
from typing import Any

import httpx
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_none

from reqres_client.retry import is_transient

BASE_URL = "https://reqres.test/api/"

NO_WAIT_RETRY = retry(
    stop=stop_after_attempt(3),
    wait=wait_none(),
    retry=retry_if_exception(is_transient),
    reraise=True,
)


def user_payload(user_id: int) -> dict[str, Any]:
    return {
        "id": user_id,
        "email": f"user{user_id}@reqres.in",
        "first_name": f"First{user_id}",
        "last_name": f"Last{user_id}",
        "avatar": f"https://reqres.in/img/faces/{user_id}-image.jpg",
    }


def page_body(page: int, user_ids: list[int], total_pages: int, per_page: int = 6) -> dict[str, Any]:
    return {
        "page": page,
        "per_page": per_page,
        "total": total_pages * per_page,
        "total_pages": total_pages,
        "data": [user_payload(i) for i in user_ids],
        "support": {"url": "https://reqres.in/#support-heading", "text": "Support ReqRes"},
    }


class RecordingHandler:
    """httpx.MockTransport handler serving canned responses by relative path.

    Unknown paths get a 404. A route may be a callable to vary the response
    between calls.
    """

    def __init__(self, routes: dict[str, httpx.Response | Callable[[], httpx.Response]]) -> None:
        self._routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get(_relative(request))
        if route is None:
            return httpx.Response(404, json={})
        return route() if callable(route) else fresh(route)

    @property
    def paths(self) -> list[str]:
        return [_relative(r) for r in self.requests]


def fresh(response: httpx.Response) -> httpx.Response:
    """Copy a canned response so each request gets an unread instance."""
    return httpx.Response(response.status_code, headers=response.headers, content=response.content)


def _relative(request: httpx.Request) -> str:
    return request.url.raw_path.decode().removeprefix("/api/")

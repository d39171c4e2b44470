from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from reqres_client.transport import DEFAULT_BASE_URL, ReqResTransport
from tests.helpers import BASE_URL, NO_WAIT_RETRY, RecordingHandler, fresh, user_payload

if TYPE_CHECKING:
    from collections.abc import Callable


class FailNHandler:
    def __init__(self, fail_count: int, failure: Callable[[], httpx.Response], success: httpx.Response) -> None:
        self._fail_count = fail_count
        self._failure = failure
        self._success = success
        self.call_count = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.call_count += 1
        if self.call_count <= self._fail_count:
            return self._failure()
        return fresh(self._success)


def _transport(handler: Callable[[httpx.Request], httpx.Response]) -> ReqResTransport:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
    return ReqResTransport(BASE_URL, client=client, retry=NO_WAIT_RETRY)


class TestReqResTransport:
    async def test_get_resolves_relative_path(self) -> None:
        handler = RecordingHandler({"users/2": httpx.Response(200, json={"data": user_payload(2)})})
        transport = _transport(handler)

        response = await transport.get("users/2")

        assert response.json()["data"]["id"] == 2
        assert str(handler.requests[0].url) == "https://reqres.test/api/users/2"

    async def test_query_string_is_preserved(self) -> None:
        handler = RecordingHandler({"users?page=3": httpx.Response(200, json={})})
        transport = _transport(handler)

        await transport.get("users?page=3")

        assert handler.requests[0].url.params["page"] == "3"

    async def test_retries_429_then_succeeds(self) -> None:
        handler = FailNHandler(2, lambda: httpx.Response(429), httpx.Response(200, json={"ok": True}))
        transport = _transport(handler)

        response = await transport.get("users/1")

        assert response.status_code == 200
        assert handler.call_count == 3

    async def test_retries_5xx_until_exhausted(self) -> None:
        handler = FailNHandler(10, lambda: httpx.Response(503), httpx.Response(200))
        transport = _transport(handler)

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await transport.get("users/1")

        assert exc_info.value.response.status_code == 503
        assert handler.call_count == 3

    async def test_404_is_not_retried(self) -> None:
        handler = FailNHandler(10, lambda: httpx.Response(404), httpx.Response(200))
        transport = _transport(handler)

        with pytest.raises(httpx.HTTPStatusError):
            await transport.get("users/999")

        assert handler.call_count == 1

    async def test_connection_errors_are_retried(self) -> None:
        calls: list[int] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(1)
            if len(calls) == 1:
                raise httpx.ConnectError("reset", request=request)
            return httpx.Response(200, json={})

        response = await _transport(handler).get("users/1")

        assert response.status_code == 200
        assert len(calls) == 2

    async def test_injected_client_without_base_url_gets_one(self) -> None:
        handler = RecordingHandler({"users/1": httpx.Response(200, json={})})
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        transport = ReqResTransport(BASE_URL, client=client, retry=NO_WAIT_RETRY)

        await transport.get("users/1")

        assert transport.base_url == BASE_URL
        assert str(handler.requests[0].url) == "https://reqres.test/api/users/1"

    async def test_default_base_url(self) -> None:
        async with ReqResTransport() as transport:
            assert transport.base_url == DEFAULT_BASE_URL

    async def test_does_not_close_injected_client(self) -> None:
        client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)), base_url=BASE_URL)
        async with ReqResTransport(BASE_URL, client=client, retry=NO_WAIT_RETRY):
            pass
        assert not client.is_closed
        await client.aclose()

    async def test_closes_owned_client(self) -> None:
        transport = ReqResTransport(BASE_URL)
        await transport.aclose()
        assert transport._client.is_closed

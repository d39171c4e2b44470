"""Shared pytest fixtures for test modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from reqres_client.transport import ReqResTransport
from tests.helpers import BASE_URL, NO_WAIT_RETRY

if TYPE_CHECKING:
    from collections.abc import Callable

    from tests.helpers import RecordingHandler


@pytest.fixture
def make_transport() -> Callable[[RecordingHandler], ReqResTransport]:
    """Build a ReqResTransport over an httpx.MockTransport whose retries never sleep.

    Usage:
        def test_fetch(make_transport) -> None:
            handler = RecordingHandler({"users/1": httpx.Response(200, json=...)})
            transport = make_transport(handler)
    """

    def _make(handler: RecordingHandler) -> ReqResTransport:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
        return ReqResTransport(BASE_URL, client=client, retry=NO_WAIT_RETRY)

    return _make

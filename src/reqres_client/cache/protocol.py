from __future__ import annotations

from typing import Protocol


class CacheStore(Protocol):
    def get(self, key: str) -> object | None: ...

    def put(self, key: str, value: object, ttl_seconds: float) -> None: ...

    def clear(self) -> None: ...

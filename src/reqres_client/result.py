"""Ok/Err values returned by single-attempt fetches.

A fetch reports failure as ``Err(FetchError)`` instead of raising, and the
caller picks the fallback:

    result = await api.fetch_page(1)
    if result.is_err():
        log(result.unwrap_err())
    else:
        page = result.unwrap()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn, final


class UnwrapError(Exception):
    """Raised when the wrong side of a result is unwrapped."""


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(f"Expected an error, got {self.value!r}")


@final
@dataclass(frozen=True, slots=True)
class Err[E: Exception]:
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError(f"Expected a value, got error: {self.error}") from self.error

    def unwrap_err(self) -> E:
        return self.error


type Result[T, E: Exception] = Ok[T] | Err[E]

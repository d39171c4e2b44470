"""User records and the envelopes the ReqRes API wraps them in.

Single user::

    {"data": {"id": 2, "email": ..., "first_name": ..., "last_name": ..., "avatar": ...},
     "support": {"url": ..., "text": ...}}

List::

    {"page": 1, "per_page": 6, "total": 12, "total_pages": 2, "data": [...], "support": {...}}

Property names are matched case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from reqres_client.errors import DecodeError


@dataclass(frozen=True)
class User:
    id: int
    email: str
    first_name: str
    last_name: str
    avatar: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class Support:
    url: str
    text: str


@dataclass(frozen=True)
class Page:
    """One page of a user listing.

    Attributes:
        page: Page index reported by the server.
        per_page: Page size reported by the server.
        total: Total record count across all pages.
        total_pages: Total page count; drives the fetch-all loop.
        users: Records on this page, or None when the envelope carried no data.
        support: Optional support block.
    """

    page: int
    per_page: int
    total: int
    total_pages: int
    users: tuple[User, ...] | None
    support: Support | None = None


def _fold_keys(payload: Any, what: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise DecodeError(f"Expected JSON object for {what}, got {type(payload).__name__}")
    return {str(k).lower(): v for k, v in payload.items()}


def _int_field(fields: dict[str, Any], name: str, default: int | None = None) -> int:
    value = fields.get(name)
    if value is None:
        if default is None:
            raise DecodeError(f"Missing required field '{name}'")
        return default
    # bool is an int subclass but never a valid count or id
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Field '{name}' must be an integer, got {value!r}")
    return value


def _str_field(fields: dict[str, Any], name: str) -> str:
    value = fields.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"Field '{name}' must be a string, got {value!r}")
    return value


def decode_user(payload: Any) -> User:
    """Decode a single user object."""
    fields = _fold_keys(payload, "user")
    return User(
        id=_int_field(fields, "id"),
        email=_str_field(fields, "email"),
        first_name=_str_field(fields, "first_name"),
        last_name=_str_field(fields, "last_name"),
        avatar=_str_field(fields, "avatar"),
    )


def decode_support(payload: Any) -> Support | None:
    if payload is None:
        return None
    fields = _fold_keys(payload, "support")
    return Support(url=_str_field(fields, "url"), text=_str_field(fields, "text"))


def decode_single_user(body: Any) -> User | None:
    """Decode a single-user envelope. Returns None when ``data`` is null or absent."""
    fields = _fold_keys(body, "single user envelope")
    data = fields.get("data")
    if data is None:
        return None
    return decode_user(data)


def decode_page(body: Any) -> Page:
    """Decode a list envelope into a Page.

    Raises:
        DecodeError: If the body or any record does not match the envelope shape.
    """
    fields = _fold_keys(body, "list envelope")
    data = fields.get("data")
    users: tuple[User, ...] | None
    if data is None:
        users = None
    elif isinstance(data, list):
        users = tuple(decode_user(item) for item in data)
    else:
        raise DecodeError(f"Field 'data' must be a list, got {type(data).__name__}")
    return Page(
        page=_int_field(fields, "page", default=0),
        per_page=_int_field(fields, "per_page", default=0),
        total=_int_field(fields, "total", default=0),
        total_pages=_int_field(fields, "total_pages", default=0),
        users=users,
        support=decode_support(fields.get("support")),
    )

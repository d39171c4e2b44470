from reqres_client.cache import CacheStore, MemoryCacheStore
from reqres_client.client import ReqResApiClient
from reqres_client.errors import DecodeError, FetchError, TransportError, UnexpectedError
from reqres_client.factory import user_service_session
from reqres_client.models import Page, User
from reqres_client.service import UserService
from reqres_client.transport import ReqResTransport

__all__ = [
    "CacheStore",
    "DecodeError",
    "FetchError",
    "MemoryCacheStore",
    "Page",
    "ReqResApiClient",
    "ReqResTransport",
    "TransportError",
    "UnexpectedError",
    "User",
    "UserService",
    "user_service_session",
]

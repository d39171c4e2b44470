from reqres_client.cache.memory_store import CacheEntry, MemoryCacheStore
from reqres_client.cache.protocol import CacheStore

__all__ = ["CacheEntry", "CacheStore", "MemoryCacheStore"]

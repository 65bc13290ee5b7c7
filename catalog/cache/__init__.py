"""In-process caching for catalog query results."""

from catalog.cache.lru_cache import CacheStats, LRUCache

__all__ = [
    "CacheStats",
    "LRUCache",
]

"""Bounded LRU cache with lifetime hit/miss statistics. Thread-safe, in-memory."""

import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time copy of the cache counters."""

    hits: int
    misses: int
    evictions: int
    size: int
    capacity: int

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


class LRUCache(Generic[K, V]):
    """
    Key -> value store with access-order eviction.

    An OrderedDict keeps recency: the front is least recently used, the back most
    recently used. get/put/evict are O(1). A single lock guards the map, the
    recency order and the counters, so clear() never interleaves with get/put.
    Counters are lifetime values: clear() empties entries but keeps them.

    None is reserved to signal a miss, so None values are rejected by put().
    Every clear() starts a new generation; put_if_generation() lets a caller that
    computed a value across an await skip the insert if the cache was cleared meanwhile.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be > 0, got {capacity}")
        self._capacity = capacity
        self._data: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._generation = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def hits(self) -> int:
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        with self._lock:
            return self._misses

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def get(self, key: K) -> Optional[V]:
        """Return the value and promote the key (hit), or None (miss)."""
        with self._lock:
            if key not in self._data:
                self._misses += 1
                return None
            self._data.move_to_end(key)
            self._hits += 1
            return self._data[key]

    def put(self, key: K, value: V) -> None:
        """Insert or overwrite, promote, then evict at most one LRU entry if over capacity."""
        if value is None:
            raise ValueError("None cannot be cached")
        with self._lock:
            self._insert(key, value)

    def put_if_generation(self, key: K, value: V, generation: int) -> bool:
        """put() only if no clear() happened since `generation` was read. True if stored."""
        if value is None:
            raise ValueError("None cannot be cached")
        with self._lock:
            if generation != self._generation:
                return False
            self._insert(key, value)
            return True

    def _insert(self, key: K, value: V) -> None:
        # caller holds self._lock
        self._data[key] = value
        self._data.move_to_end(key)
        if len(self._data) > self._capacity:
            self._data.popitem(last=False)
            self._evictions += 1

    def clear(self) -> None:
        """Drop all entries. Statistics are lifetime, not per-generation."""
        with self._lock:
            self._data.clear()
            self._generation += 1

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                size=len(self._data),
                capacity=self._capacity,
            )

    def keys(self) -> list[K]:
        """Keys from least to most recently used. No recency side effects."""
        with self._lock:
            return list(self._data.keys())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

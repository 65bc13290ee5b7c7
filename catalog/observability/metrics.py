"""Catalog metrics sink. Thread-safe, in-memory. Read by operators and the interceptor."""

import threading
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MetricsSnapshot:
    """Copy of the catalog gauges. Fields are independent of each other."""

    last_query_latency_ms: float
    entity_count: int
    cache_hits: int
    cache_misses: int


class CatalogMetrics:
    """
    Process-wide gauges updated by the search and mutation paths:
    last query latency, entity count, cache hits/misses.
    Also keeps per-operation latency aggregates fed by the interceptor.
    Every update and read takes the lock, so concurrent observers never see a torn value.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_query_latency_ms: float = 0.0
        self._entity_count: int = 0
        self._cache_hits: int = 0
        self._cache_misses: int = 0
        # operation name -> {"count", "total_ms", "last_ms"}
        self._operations: dict[str, dict[str, float]] = {}

    def set_last_query_latency(self, latency_ms: float) -> None:
        with self._lock:
            self._last_query_latency_ms = latency_ms

    def set_entity_count(self, count: int) -> None:
        with self._lock:
            self._entity_count = count

    def set_cache_stats(self, hits: int, misses: int) -> None:
        with self._lock:
            self._cache_hits = hits
            self._cache_misses = misses

    def observe_latency(self, operation: str, latency_ms: float) -> None:
        """Record one timed call of an instrumented operation."""
        with self._lock:
            agg = self._operations.setdefault(
                operation, {"count": 0, "total_ms": 0.0, "last_ms": 0.0}
            )
            agg["count"] += 1
            agg["total_ms"] += latency_ms
            agg["last_ms"] = latency_ms

    def get_snapshot(self) -> MetricsSnapshot:
        with self._lock:
            return MetricsSnapshot(
                last_query_latency_ms=self._last_query_latency_ms,
                entity_count=self._entity_count,
                cache_hits=self._cache_hits,
                cache_misses=self._cache_misses,
            )

    def snapshot(self) -> str:
        """Human-readable rendering for display."""
        s = self.get_snapshot()
        return (
            "--- Metrics ---\n"
            f"products: {s.entity_count}\n"
            f"lastQueryMs: {s.last_query_latency_ms:.3f}\n"
            f"cache: hits={s.cache_hits}, misses={s.cache_misses}\n"
        )

    def export_metrics(self) -> dict[str, Any]:
        """Export all metrics as a dict."""
        with self._lock:
            return {
                "gauges": {
                    "last_query_latency_ms": self._last_query_latency_ms,
                    "entity_count": self._entity_count,
                    "cache_hits": self._cache_hits,
                    "cache_misses": self._cache_misses,
                },
                "operations": {k: dict(v) for k, v in self._operations.items()},
            }

    def reset(self) -> None:
        """Reset all metrics (for tests)."""
        with self._lock:
            self._last_query_latency_ms = 0.0
            self._entity_count = 0
            self._cache_hits = 0
            self._cache_misses = 0
            self._operations.clear()

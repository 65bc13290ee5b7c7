"""Catalog application service: CRUD, cached filtered search, pagination, metrics."""

import logging
import time
from typing import Callable, List, Optional, Sequence, TypeVar

from catalog.application.ports import MetricsSink, ProductRepository
from catalog.cache.lru_cache import LRUCache
from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.models.audit import AuditAction
from catalog.domain.models.product import Category, Product
from catalog.domain.models.search import SearchFilter
from catalog.domain.validators import validate_pagination, validate_price
from catalog.instrumentation.registry import instrumented

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, size: int) -> List[T]:
    """Zero-based page slice [page*size, min(page*size+size, len)). Past the end -> []."""
    validate_pagination(page, size)
    start = page * size
    if start >= len(items):
        return []
    return list(items[start : min(start + size, len(items))])


class CatalogService:
    """
    Application-layer orchestration only. Search results are memoized in an LRU cache
    as ordered product ids, never as entity snapshots: a hit re-reads each product from
    the repository, so price/active/description changes are always visible and ids that
    disappeared are dropped. Any create/update/delete clears the whole cache and refreshes
    the entity-count metric. A miss whose scan overlapped a mutation returns its result
    but does not cache it.
    """

    def __init__(
        self,
        repository: ProductRepository,
        metrics: MetricsSink,
        cache: LRUCache[str, List[int]],
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._repository = repository
        self._metrics = metrics
        self._cache = cache
        self._logger = logger or logging.getLogger(__name__)
        self._clock = clock

    @property
    def cache(self) -> LRUCache[str, List[int]]:
        return self._cache

    @instrumented(AuditAction.CREATE)
    async def create(self, product: Product) -> Product:
        """Persist a new product; the repository assigns its id."""
        validate_price(product.price)
        saved = await self._repository.save(product)
        await self._after_mutation("create")
        return saved

    @instrumented()
    async def get(self, product_id: int) -> Optional[Product]:
        return await self._repository.find_by_id(product_id)

    @instrumented(AuditAction.UPDATE)
    async def update(self, product: Product) -> Product:
        """Replace an existing product. Raises ProductNotFoundError if it does not exist."""
        if product.id is None or await self._repository.find_by_id(product.id) is None:
            raise ProductNotFoundError(product.id)
        validate_price(product.price)
        saved = await self._repository.save(product)
        await self._after_mutation("update")
        return saved

    @instrumented(AuditAction.DELETE)
    async def delete(self, product_id: int) -> bool:
        deleted = await self._repository.delete_by_id(product_id)
        await self._after_mutation("delete")
        return deleted

    @instrumented()
    async def list_all(self) -> List[Product]:
        return list(await self._repository.find_all())

    @instrumented(AuditAction.SEARCH)
    async def search(
        self,
        text: Optional[str] = None,
        brand: Optional[str] = None,
        category: Optional[Category] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        only_active: Optional[bool] = None,
    ) -> List[Product]:
        """Filter the catalog. Raises InvalidPriceRangeError for a bad price range."""
        search_filter = SearchFilter(
            text=text,
            brand=brand,
            category=category,
            min_price=min_price,
            max_price=max_price,
            only_active=only_active,
        )
        return await self.search_by(search_filter)

    async def search_by(self, search_filter: SearchFilter) -> List[Product]:
        """Cached search for an already-built filter. Latency and cache stats recorded on every call."""
        key = search_filter.cache_key()
        start = self._clock()
        # Read before the scan: a mutation that lands during find_all() bumps it.
        generation = self._cache.generation
        cached_ids = self._cache.get(key)
        if cached_ids is not None:
            result = await self._resolve_ids(cached_ids)
            self._logger.debug("search_cache_hit", extra={"cache_key": key, "count": len(result)})
        else:
            products = await self._repository.find_all()
            result = [p for p in products if search_filter.matches(p)]
            stored = self._cache.put_if_generation(
                key, [p.id for p in result if p.id is not None], generation
            )
            self._logger.debug(
                "search_cache_miss",
                extra={"cache_key": key, "count": len(result), "stored": stored},
            )
        latency_ms = (self._clock() - start) * 1000.0
        self._metrics.set_last_query_latency(latency_ms)
        stats = self._cache.stats()
        self._metrics.set_cache_stats(stats.hits, stats.misses)
        return result

    @instrumented()
    async def search_page(
        self,
        search_filter: SearchFilter,
        page: int,
        size: int,
    ) -> List[Product]:
        """Search then paginate. Pagination arguments are validated before searching."""
        validate_pagination(page, size)
        return paginate(await self.search_by(search_filter), page, size)

    @instrumented()
    def paginate(self, items: Sequence[T], page: int, size: int) -> List[T]:
        return paginate(items, page, size)

    def invalidate_cache(self) -> None:
        self._cache.clear()
        self._logger.info("cache_invalidated")

    async def refresh_entity_count(self) -> int:
        count = len(await self._repository.find_all())
        self._metrics.set_entity_count(count)
        return count

    async def _after_mutation(self, operation: str) -> None:
        self.invalidate_cache()
        count = await self.refresh_entity_count()
        self._logger.info("catalog_mutated", extra={"mutation": operation, "entity_count": count})

    async def _resolve_ids(self, ids: Sequence[int]) -> List[Product]:
        by_id = {p.id: p for p in await self._repository.find_all()}
        return [by_id[i] for i in ids if i in by_id]

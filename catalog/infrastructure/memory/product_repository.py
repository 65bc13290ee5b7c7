"""In-memory product repository. Implements ProductRepository protocol."""

import threading
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from catalog.domain.models.product import Product


class InMemoryProductRepository:
    """
    Dict-backed store keyed by id, ids assigned from a monotonic counter.
    Stores and returns copies so callers cannot mutate stored state behind the cache.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._lock = threading.Lock()
        self._store: Dict[int, Product] = {}
        self._next_id = 1
        for product in products:
            self._put(product)

    def _put(self, product: Product) -> Product:
        stored = replace(product)
        if stored.id is None:
            stored.id = self._next_id
        self._next_id = max(self._next_id, stored.id + 1)
        self._store[stored.id] = stored
        return replace(stored)

    async def find_all(self) -> List[Product]:
        with self._lock:
            return [replace(p) for p in self._store.values()]

    async def find_by_id(self, product_id: int) -> Optional[Product]:
        with self._lock:
            product = self._store.get(product_id)
            return replace(product) if product is not None else None

    async def save(self, product: Product) -> Product:
        """Insert (assigning an id) or replace by id."""
        with self._lock:
            saved = self._put(product)
        product.id = saved.id
        return saved

    async def delete_by_id(self, product_id: int) -> bool:
        with self._lock:
            return self._store.pop(product_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

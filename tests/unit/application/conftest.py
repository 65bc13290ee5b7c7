"""Shared fixtures for application-layer tests: a seeded catalog and a deterministic clock."""

import itertools
from unittest.mock import MagicMock

import pytest

from catalog.application.catalog_service import CatalogService
from catalog.cache.lru_cache import LRUCache
from catalog.domain.models.product import Category, Product
from catalog.infrastructure.memory.product_repository import InMemoryProductRepository
from catalog.observability.metrics import CatalogMetrics


def seed_products() -> list[Product]:
    return [
        Product(id=1, name="iPhone 14", brand="Apple", category=Category.ELECTRONICS, price=999.0, description="Smartphone"),
        Product(id=2, name="MacBook Air", brand="Apple", category=Category.ELECTRONICS, price=1299.0, description="Laptop"),
        Product(id=3, name="Running Shoes", brand="Nike", category=Category.SPORTS, price=120.0, description="Lightweight trainers"),
        Product(id=4, name="Coffee", brand="Lavazza", category=Category.FOOD, price=8.5, description="Espresso beans"),
    ]


class StepClock:
    """Each read advances by `step` seconds."""

    def __init__(self, step: float = 0.002) -> None:
        self._ticks = itertools.count()
        self._step = step

    def __call__(self) -> float:
        return next(self._ticks) * self._step


@pytest.fixture
def products():
    return seed_products()


@pytest.fixture
def repository(products):
    return InMemoryProductRepository(products)


@pytest.fixture
def metrics():
    return CatalogMetrics()


@pytest.fixture
def cache():
    return LRUCache(16)


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def catalog_service(repository, metrics, cache, logger):
    return CatalogService(
        repository=repository,
        metrics=metrics,
        cache=cache,
        logger=logger,
        clock=StepClock(),
    )

"""In-memory repositories. Default collaborators for embedding and tests."""

from catalog.infrastructure.memory.product_repository import InMemoryProductRepository
from catalog.infrastructure.memory.user_repository import InMemoryUserRepository

__all__ = [
    "InMemoryProductRepository",
    "InMemoryUserRepository",
]

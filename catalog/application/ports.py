"""Collaborator protocols. The application layer depends on these; infrastructure implements them."""

from typing import Any, List, Optional, Protocol, Sequence

from catalog.domain.models.audit import AuditRecord
from catalog.domain.models.product import Category, Product
from catalog.domain.models.search import SearchFilter
from catalog.domain.models.user import Role, User


class ProductRepository(Protocol):
    """Product storage. The core never assumes a particular storage medium."""

    async def find_all(self) -> Sequence[Product]:
        """Return every stored product."""
        ...

    async def find_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product or None if not found."""
        ...

    async def save(self, product: Product) -> Product:
        """Insert or replace. Assigns an id when product.id is None. Returns the stored product."""
        ...

    async def delete_by_id(self, product_id: int) -> bool:
        """Delete; True if something was removed."""
        ...


class UserRepository(Protocol):
    async def find_by_username(self, username: str) -> Optional[User]:
        ...

    async def save(self, user: User) -> User:
        ...

    async def exists(self, username: str) -> bool:
        ...


class MetricsSink(Protocol):
    """Gauges updated by the search and mutation paths."""

    def set_last_query_latency(self, latency_ms: float) -> None:
        ...

    def set_entity_count(self, count: int) -> None:
        ...

    def set_cache_stats(self, hits: int, misses: int) -> None:
        ...

    def snapshot(self) -> str:
        """Human-readable rendering for display."""
        ...


class AuditSink(Protocol):
    """Persists audit records. Called off the caller's path; may block or fail."""

    def append(self, record: AuditRecord) -> None:
        ...


class ActorProvider(Protocol):
    """Supplies the identity an operation is attributed to. May raise or return None/blank."""

    def current_actor_name(self) -> Optional[str]:
        ...


class CatalogOperations(Protocol):
    """Public catalog surface a transport layer sits behind. Used as the proxy interface."""

    async def create(self, product: Product) -> Product:
        ...

    async def get(self, product_id: int) -> Optional[Product]:
        ...

    async def update(self, product: Product) -> Product:
        ...

    async def delete(self, product_id: int) -> bool:
        ...

    async def list_all(self) -> List[Product]:
        ...

    async def search(
        self,
        text: Optional[str] = None,
        brand: Optional[str] = None,
        category: Optional[Category] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        only_active: Optional[bool] = None,
    ) -> List[Product]:
        ...

    async def search_page(self, search_filter: SearchFilter, page: int, size: int) -> List[Product]:
        ...

    def paginate(self, items: Sequence[Any], page: int, size: int) -> List[Any]:
        ...


class AuthOperations(Protocol):
    async def register(self, username: str, password: str, role: Role = Role.USER) -> User:
        ...

    async def login(self, session: Any, username: str, password: str) -> Optional[User]:
        ...

    async def logout(self, session: Any) -> None:
        ...

    async def exists(self, username: str) -> bool:
        ...

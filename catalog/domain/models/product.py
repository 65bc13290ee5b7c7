"""Domain model for catalog products. Pure business semantics, no ORM or infrastructure."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Category(str, Enum):
    """Product category. Category filters match exactly."""

    ELECTRONICS = "ELECTRONICS"
    CLOTHING = "CLOTHING"
    FOOD = "FOOD"
    SPORTS = "SPORTS"
    BOOKS = "BOOKS"
    HOME = "HOME"
    OTHER = "OTHER"


@dataclass
class Product:
    """
    Catalog entity. id is None until the repository assigns one on first save.
    Identity is the id: two products with the same id are the same product.
    Unsaved products (id None) are only equal to themselves.
    """

    name: str
    brand: str
    category: Category
    price: float
    description: Optional[str] = None
    active: bool = True
    id: Optional[int] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else object.__hash__(self)

    def __str__(self) -> str:
        # Used verbatim in audit details, keep it stable.
        suffix = "" if self.active else " [INACTIVE]"
        return (
            f"#{self.id} | {self.name} ({self.brand}) | {self.category.value} | "
            f"{self.price:.2f} | {self.description}{suffix}"
        )

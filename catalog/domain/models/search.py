"""Search filter value object: normalization, predicate and cache-key derivation."""

from dataclasses import dataclass
from typing import Optional

from catalog.domain.models.product import Category, Product
from catalog.domain.validators import validate_price_range

KEY_DELIMITER = "|"
# Escaping doubles every backslash, so a lone "\N" can only come from an absent filter.
ABSENT_SENTINEL = "\\N"


def _normalize_text(value: Optional[str]) -> Optional[str]:
    """Trim, preserve case; blank means absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace(KEY_DELIMITER, "\\" + KEY_DELIMITER)


def _key_part(value: object) -> str:
    if value is None:
        return ABSENT_SENTINEL
    if isinstance(value, Category):
        return _escape(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return _escape(str(value))


@dataclass(frozen=True)
class SearchFilter:
    """
    Normalized filter tuple. All fields optional; an empty filter matches every product.
    Construction validates the price range.
    """

    text: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[Category] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    only_active: Optional[bool] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", _normalize_text(self.text))
        object.__setattr__(self, "brand", _normalize_text(self.brand))
        if self.min_price is not None:
            object.__setattr__(self, "min_price", float(self.min_price))
        if self.max_price is not None:
            object.__setattr__(self, "max_price", float(self.max_price))
        validate_price_range(self.min_price, self.max_price)

    def cache_key(self) -> str:
        """
        Exact structural join of the normalized fields in fixed order:
        text, brand, category, min_price, max_price, only_active.
        Identical filters always yield identical keys; distinct filters never collide.
        """
        parts = (
            self.text,
            self.brand,
            self.category,
            self.min_price,
            self.max_price,
            self.only_active,
        )
        return KEY_DELIMITER.join(_key_part(p) for p in parts)

    def matches(self, product: Product) -> bool:
        """Conjunction of every present filter."""
        if self.text is not None:
            q = self.text.lower()
            in_name = q in (product.name or "").lower()
            in_description = product.description is not None and q in product.description.lower()
            if not (in_name or in_description):
                return False
        if self.brand is not None:
            if product.brand is None or self.brand.lower() not in product.brand.lower():
                return False
        if self.category is not None and product.category != self.category:
            return False
        if self.min_price is not None and product.price < self.min_price:
            return False
        if self.max_price is not None and product.price > self.max_price:
            return False
        if self.only_active and not product.active:
            return False
        return True

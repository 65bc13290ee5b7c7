"""Validators for catalog domain rules. Pure functions, no infrastructure access."""

from typing import Optional

from catalog.domain.exceptions import (
    DomainValidationError,
    InvalidPaginationError,
    InvalidPriceRangeError,
)

PRICE_MIN = 0.0


def validate_price_range(min_price: Optional[float], max_price: Optional[float]) -> None:
    """Bounds are optional; present bounds must be >= 0 and min must not exceed max."""
    for label, bound in (("min_price", min_price), ("max_price", max_price)):
        if bound is not None and bound < PRICE_MIN:
            raise InvalidPriceRangeError(f"{label} must be >= {PRICE_MIN}, got {bound}")
    if min_price is not None and max_price is not None and min_price > max_price:
        raise InvalidPriceRangeError(
            f"min_price must not exceed max_price, got {min_price} > {max_price}"
        )


def validate_pagination(page: int, size: int) -> None:
    """Reject, never clamp: page must be >= 0 and size > 0."""
    if size <= 0:
        raise InvalidPaginationError(f"size must be > 0, got {size}")
    if page < 0:
        raise InvalidPaginationError(f"page must be >= 0, got {page}")


def validate_credentials(username: Optional[str], password: Optional[str]) -> None:
    """Username and password must be set and non-blank."""
    if not username or not username.strip():
        raise DomainValidationError("username must not be empty")
    if not password or not password.strip():
        raise DomainValidationError("password must not be empty")


def validate_price(price: float) -> None:
    if price < PRICE_MIN:
        raise DomainValidationError(f"price must be >= {PRICE_MIN}, got {price}")

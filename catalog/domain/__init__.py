"""Domain layer: models, validators, exceptions. Pure business logic only."""

from catalog.domain.exceptions import (
    DomainError,
    DomainValidationError,
    InvalidPaginationError,
    InvalidPriceRangeError,
    ProductNotFoundError,
)
from catalog.domain.models import (
    ANONYMOUS_ACTOR,
    AuditAction,
    AuditRecord,
    Category,
    Product,
    Role,
    SearchFilter,
    User,
)
from catalog.domain.validators import (
    validate_credentials,
    validate_pagination,
    validate_price,
    validate_price_range,
)

__all__ = [
    "ANONYMOUS_ACTOR",
    "AuditAction",
    "AuditRecord",
    "Category",
    "DomainError",
    "DomainValidationError",
    "InvalidPaginationError",
    "InvalidPriceRangeError",
    "Product",
    "ProductNotFoundError",
    "Role",
    "SearchFilter",
    "User",
    "validate_credentials",
    "validate_pagination",
    "validate_price",
    "validate_price_range",
]

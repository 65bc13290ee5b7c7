"""Domain-specific exceptions. Pure domain layer, no infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainValidationError(DomainError):
    """Raised when domain validation rules are violated. Never retried."""


class InvalidPaginationError(DomainValidationError):
    """Raised when page is negative or page size is not positive."""


class InvalidPriceRangeError(DomainValidationError):
    """Raised when a price bound is negative or min_price exceeds max_price."""


class ProductNotFoundError(DomainError):
    """Raised when a mutation targets a product that does not exist. Not a validation error."""

    def __init__(self, product_id: int | None) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")

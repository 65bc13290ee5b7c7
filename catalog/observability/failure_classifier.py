"""Failure categorization for timing logs and metrics. Maps exceptions to taxonomy."""

from enum import Enum

from catalog.application.exceptions import UsernameTakenError
from catalog.domain.exceptions import (
    DomainError,
    DomainValidationError,
    ProductNotFoundError,
)
from catalog.instrumentation.exceptions import InstrumentationError


class FailureCategory(str, Enum):
    """Taxonomy for failure classification."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    WIRING_ERROR = "WIRING_ERROR"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class FailureClassifier:
    """
    Classifies exceptions into FailureCategory. The interceptor attaches the category
    to failed timing records; the exception itself is never altered.
    """

    @staticmethod
    def classify(exception: BaseException) -> FailureCategory:
        """Map exception to FailureCategory. Unknown -> UNEXPECTED_ERROR."""
        if isinstance(exception, DomainValidationError):
            return FailureCategory.VALIDATION_ERROR
        if isinstance(exception, ProductNotFoundError):
            return FailureCategory.NOT_FOUND
        if isinstance(exception, InstrumentationError):
            return FailureCategory.WIRING_ERROR
        if isinstance(exception, UsernameTakenError):
            return FailureCategory.CONFLICT
        if isinstance(exception, DomainError):
            return FailureCategory.VALIDATION_ERROR
        if isinstance(exception, (ValueError, TypeError)):
            return FailureCategory.VALIDATION_ERROR
        return FailureCategory.UNEXPECTED_ERROR

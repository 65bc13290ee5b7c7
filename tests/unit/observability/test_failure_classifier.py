"""FailureClassifier: every error kind maps to its category."""

import pytest

from catalog.application.exceptions import UsernameTakenError
from catalog.domain.exceptions import (
    DomainValidationError,
    InvalidPaginationError,
    InvalidPriceRangeError,
    ProductNotFoundError,
)
from catalog.instrumentation.exceptions import InstrumentationError, OperationNotResolvableError
from catalog.observability.failure_classifier import FailureCategory, FailureClassifier


@pytest.mark.parametrize(
    "exc,expected",
    [
        (DomainValidationError("bad"), FailureCategory.VALIDATION_ERROR),
        (InvalidPaginationError("bad page"), FailureCategory.VALIDATION_ERROR),
        (InvalidPriceRangeError("bad range"), FailureCategory.VALIDATION_ERROR),
        (ProductNotFoundError(1), FailureCategory.NOT_FOUND),
        (OperationNotResolvableError("search", object()), FailureCategory.WIRING_ERROR),
        (InstrumentationError("bad wiring"), FailureCategory.WIRING_ERROR),
        (UsernameTakenError("taken"), FailureCategory.CONFLICT),
        (ValueError("x"), FailureCategory.VALIDATION_ERROR),
        (RuntimeError("boom"), FailureCategory.UNEXPECTED_ERROR),
    ],
)
def test_classify(exc, expected):
    assert FailureClassifier.classify(exc) == expected

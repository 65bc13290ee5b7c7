"""Domain model tests: product identity and rendering, audit record immutability, validators."""

from datetime import datetime, timezone

import pytest

from catalog.domain.exceptions import (
    DomainError,
    DomainValidationError,
    InvalidPaginationError,
    ProductNotFoundError,
)
from catalog.domain.models.audit import AuditAction, AuditRecord
from catalog.domain.models.product import Category, Product
from catalog.domain.models.user import Role, User
from catalog.domain.validators import (
    validate_credentials,
    validate_pagination,
    validate_price,
)


def test_product_str_renders_all_fields():
    p = Product(id=3, name="Coffee", brand="Lavazza", category=Category.FOOD, price=8.5, description="Beans")
    assert str(p) == "#3 | Coffee (Lavazza) | FOOD | 8.50 | Beans"


def test_inactive_product_str_is_marked():
    p = Product(id=1, name="X", brand="Y", category=Category.OTHER, price=1.0, description="d", active=False)
    assert str(p).endswith(" [INACTIVE]")


def test_product_identity_is_id():
    a = Product(id=1, name="A", brand="B", category=Category.OTHER, price=1.0)
    b = Product(id=1, name="Changed", brand="B", category=Category.OTHER, price=2.0)
    assert a == b
    assert len({a, b}) == 1


def test_user_repr_hides_password_hash():
    u = User(username="alice", password_hash="secret-hash", role=Role.ADMIN)
    assert "secret-hash" not in repr(u)
    assert str(u) == "alice (ADMIN)"


def test_audit_record_is_immutable_and_serializable():
    ts = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    record = AuditRecord(actor="alice", action=AuditAction.DELETE, details="method=delete, args=[7]", timestamp=ts)
    with pytest.raises(AttributeError):
        record.actor = "mallory"  # type: ignore[misc]
    assert record.to_dict() == {
        "actor": "alice",
        "action": "DELETE",
        "details": "method=delete, args=[7]",
        "timestamp": ts.isoformat(),
    }
    assert record.format() == f"{ts.isoformat()} | alice | DELETE | method=delete, args=[7]"


def test_not_found_is_distinct_from_validation():
    err = ProductNotFoundError(42)
    assert isinstance(err, DomainError)
    assert not isinstance(err, DomainValidationError)
    assert err.product_id == 42
    assert "42" in err.message


@pytest.mark.parametrize("page,size", [(0, 0), (0, -3), (-1, 2)])
def test_pagination_rejected_not_clamped(page, size):
    with pytest.raises(InvalidPaginationError):
        validate_pagination(page, size)


@pytest.mark.parametrize("username,password", [("", "pw"), ("  ", "pw"), ("bob", ""), (None, "pw")])
def test_blank_credentials_rejected(username, password):
    with pytest.raises(DomainValidationError):
        validate_credentials(username, password)


def test_negative_price_rejected():
    with pytest.raises(DomainValidationError):
        validate_price(-0.01)
    validate_price(0.0)


def test_unsaved_products_are_only_equal_to_themselves():
    """Without an id, identity falls back to the object itself."""
    a = Product(name="A", brand="B", category=Category.OTHER, price=1.0)
    b = Product(name="A", brand="B", category=Category.OTHER, price=1.0)
    assert a == a
    assert a != b
    assert len({a, b}) == 2
    assert a != Product(id=1, name="A", brand="B", category=Category.OTHER, price=1.0)

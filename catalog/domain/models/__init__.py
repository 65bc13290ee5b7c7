"""Domain models. Pure business entities."""

from catalog.domain.models.audit import ANONYMOUS_ACTOR, AuditAction, AuditRecord
from catalog.domain.models.product import Category, Product
from catalog.domain.models.search import SearchFilter
from catalog.domain.models.user import Role, User

__all__ = [
    "ANONYMOUS_ACTOR",
    "AuditAction",
    "AuditRecord",
    "Category",
    "Product",
    "Role",
    "SearchFilter",
    "User",
]

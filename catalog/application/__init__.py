# Application layer: services that orchestrate domain, cache and collaborators.

from catalog.application.auth_service import AuthService
from catalog.application.catalog_service import CatalogService, paginate
from catalog.application.exceptions import ApplicationError, UsernameTakenError
from catalog.application.ports import (
    ActorProvider,
    AuditSink,
    MetricsSink,
    ProductRepository,
    UserRepository,
)
from catalog.application.session import StaticActorProvider, UserSession

__all__ = [
    "ActorProvider",
    "ApplicationError",
    "AuditSink",
    "AuthService",
    "CatalogService",
    "MetricsSink",
    "ProductRepository",
    "StaticActorProvider",
    "UserRepository",
    "UserSession",
    "UsernameTakenError",
    "paginate",
]

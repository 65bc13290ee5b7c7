"""Composition root: shared singletons and per-actor instrumented services."""

import logging
from typing import List, Optional

from catalog.application.auth_service import AuthService
from catalog.application.catalog_service import CatalogService
from catalog.application.ports import (
    ActorProvider,
    AuditSink,
    AuthOperations,
    CatalogOperations,
)
from catalog.application.session import UserSession
from catalog.cache.lru_cache import LRUCache
from catalog.config.logging import configure_logging
from catalog.config.settings import AppSettings, get_settings
from catalog.infrastructure.audit.sinks import FileAuditSink, LoggingAuditSink
from catalog.infrastructure.memory.product_repository import InMemoryProductRepository
from catalog.infrastructure.memory.user_repository import InMemoryUserRepository
from catalog.instrumentation.dispatcher import AuditDispatcher
from catalog.instrumentation.interceptor import Interceptor
from catalog.instrumentation.proxy import instrument
from catalog.instrumentation.registry import OperationRegistry
from catalog.observability.metrics import CatalogMetrics

_metrics: CatalogMetrics | None = None
_search_cache: LRUCache[str, List[int]] | None = None
_audit_dispatcher: AuditDispatcher | None = None
_registry: OperationRegistry | None = None
_product_repository: InMemoryProductRepository | None = None
_user_repository: InMemoryUserRepository | None = None
_catalog_service: CatalogService | None = None


def configure() -> AppSettings:
    """Load settings and install JSON logging. Call once at process start."""
    settings = get_settings()
    configure_logging(settings.log_level)
    return settings


def get_metrics() -> CatalogMetrics:
    """Return singleton metrics sink."""
    global _metrics
    if _metrics is None:
        _metrics = CatalogMetrics()
    return _metrics


def get_search_cache() -> LRUCache[str, List[int]]:
    """Return singleton search-result cache sized from settings."""
    global _search_cache
    if _search_cache is None:
        _search_cache = LRUCache(get_settings().cache_capacity)
    return _search_cache


def build_audit_sink() -> AuditSink:
    """File sink when AUDIT_LOG_PATH is set, structured logging otherwise."""
    path = get_settings().audit_log_path
    if path:
        return FileAuditSink(path)
    return LoggingAuditSink()


def get_audit_dispatcher() -> AuditDispatcher:
    """Return singleton background audit dispatcher."""
    global _audit_dispatcher
    if _audit_dispatcher is None:
        _audit_dispatcher = AuditDispatcher(
            build_audit_sink(),
            max_queued=get_settings().audit_queue_size,
        )
    return _audit_dispatcher


def get_operation_registry() -> OperationRegistry:
    """Return singleton registry for explicitly configured operations."""
    global _registry
    if _registry is None:
        _registry = OperationRegistry()
    return _registry


def get_product_repository() -> InMemoryProductRepository:
    global _product_repository
    if _product_repository is None:
        _product_repository = InMemoryProductRepository()
    return _product_repository


def get_user_repository() -> InMemoryUserRepository:
    global _user_repository
    if _user_repository is None:
        _user_repository = InMemoryUserRepository()
    return _user_repository


def get_interceptor(actor_provider: Optional[ActorProvider] = None) -> Interceptor:
    """Interceptor bound to the given actor context; sink, registry and metrics are shared."""
    return Interceptor(
        get_audit_dispatcher(),
        actor_provider,
        registry=get_operation_registry(),
        logger=logging.getLogger("catalog.instrumentation"),
        metrics_callback=get_metrics(),
    )


def get_catalog_service(actor_provider: Optional[ActorProvider] = None) -> CatalogOperations:
    """Instrumented view of the shared CatalogService, attributed to actor_provider."""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = CatalogService(
            repository=get_product_repository(),
            metrics=get_metrics(),
            cache=get_search_cache(),
            logger=logging.getLogger("catalog.application.catalog_service"),
        )
    return instrument(_catalog_service, get_interceptor(actor_provider), CatalogOperations)


def get_auth_service(session: UserSession) -> AuthOperations:
    """Instrumented AuthService whose audit actor is the given session."""
    service = AuthService(
        repository=get_user_repository(),
        logger=logging.getLogger("catalog.application.auth_service"),
    )
    return instrument(service, get_interceptor(session), AuthOperations)


def shutdown() -> None:
    """Drain and stop the audit dispatcher, then drop every singleton."""
    global _metrics, _search_cache, _audit_dispatcher, _registry
    global _product_repository, _user_repository, _catalog_service
    if _audit_dispatcher is not None:
        _audit_dispatcher.close()
    _metrics = None
    _search_cache = None
    _audit_dispatcher = None
    _registry = None
    _product_repository = None
    _user_repository = None
    _catalog_service = None

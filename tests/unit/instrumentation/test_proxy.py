"""InstrumentedProxy tests: interface dispatch, operation naming, unresolvable operations."""

from typing import Protocol
from unittest.mock import MagicMock

import pytest

from catalog.application.ports import CatalogOperations
from catalog.domain.models.audit import AuditAction
from catalog.infrastructure.audit.sinks import InMemoryAuditSink
from catalog.instrumentation.exceptions import OperationNotResolvableError
from catalog.instrumentation.interceptor import Interceptor
from catalog.instrumentation.proxy import InstrumentedProxy, instrument, interface_operations
from catalog.instrumentation.registry import instrumented


class Greeter(Protocol):
    def greet(self, name: str) -> str:
        ...

    async def farewell(self, name: str) -> str:
        ...


class PartialGreeter:
    """Implements greet() only."""

    secret = "hidden"

    @instrumented(AuditAction.SEARCH, details="greeting")
    def greet(self, name: str) -> str:
        return f"hello {name}"

    def internal(self) -> str:
        return "internal"


class FullGreeter(PartialGreeter):
    async def farewell(self, name: str) -> str:
        return f"bye {name}"


@pytest.fixture
def sink():
    return InMemoryAuditSink()


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def interceptor(sink, logger):
    return Interceptor(sink, None, logger=logger)


def _timed_operations(logger):
    return [
        c.kwargs["extra"]["operation"]
        for c in logger.info.call_args_list
        if c.args and c.args[0] == "operation_timed"
    ]


def test_interface_operations_lists_public_methods():
    """Public methods of a Protocol are its operations."""
    assert interface_operations(Greeter) == frozenset({"greet", "farewell"})


def test_catalog_interface_covers_service_operations():
    """CatalogOperations exposes every catalog operation."""
    ops = interface_operations(CatalogOperations)
    assert {"create", "get", "update", "delete", "list_all", "search", "search_page", "paginate"} <= ops


def test_proxy_names_operations_after_interface(interceptor, sink, logger):
    """Operations are named "<Interface>.<method>"."""
    proxy = instrument(FullGreeter(), interceptor, Greeter)
    assert proxy.greet("ann") == "hello ann"
    assert _timed_operations(logger) == ["Greeter.greet"]
    assert sink.records[0].details == "greeting | method=greet, args=[ann]"


async def test_proxy_awaits_async_operations(interceptor, logger):
    """Async interface methods stay awaitable through the proxy."""
    proxy = instrument(FullGreeter(), interceptor, Greeter)
    assert await proxy.farewell("ann") == "bye ann"
    assert _timed_operations(logger) == ["Greeter.farewell"]


def test_missing_operation_is_a_wiring_error(interceptor):
    """An interface method absent from the target raises OperationNotResolvableError."""
    proxy = instrument(PartialGreeter(), interceptor, Greeter)
    with pytest.raises(OperationNotResolvableError) as exc_info:
        proxy.farewell
    assert exc_info.value.operation == "farewell"
    assert exc_info.value.target_type == "PartialGreeter"


def test_names_outside_interface_are_not_exposed(interceptor):
    """Target methods not on the interface raise AttributeError."""
    proxy = instrument(FullGreeter(), interceptor, Greeter)
    with pytest.raises(AttributeError):
        proxy.internal


def test_without_interface_uses_target_type_and_passes_attributes(interceptor, logger):
    """Without an interface, methods are wrapped and plain attributes pass through."""
    proxy = instrument(PartialGreeter(), interceptor)
    assert proxy.secret == "hidden"
    assert proxy.internal() == "internal"
    assert _timed_operations(logger) == ["PartialGreeter.internal"]


def test_target_is_reachable(interceptor):
    """The wrapped object is available via .target."""
    target = FullGreeter()
    proxy = InstrumentedProxy(target, interceptor, Greeter)
    assert proxy.target is target
    assert "InstrumentedProxy" in repr(proxy)

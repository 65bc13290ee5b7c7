"""Instrumentation layer: call interception for timing telemetry and audit trails."""

from catalog.instrumentation.dispatcher import AuditDispatcher
from catalog.instrumentation.exceptions import (
    InstrumentationError,
    OperationNotResolvableError,
)
from catalog.instrumentation.interceptor import Interceptor, render_details, resolve_actor
from catalog.instrumentation.proxy import InstrumentedProxy, instrument, interface_operations
from catalog.instrumentation.registry import (
    TIMED_ONLY,
    OperationRegistry,
    OperationSpec,
    get_operation_spec,
    instrumented,
)

__all__ = [
    "AuditDispatcher",
    "InstrumentationError",
    "InstrumentedProxy",
    "Interceptor",
    "OperationNotResolvableError",
    "OperationRegistry",
    "OperationSpec",
    "TIMED_ONLY",
    "get_operation_spec",
    "instrument",
    "instrumented",
    "interface_operations",
    "render_details",
    "resolve_actor",
]

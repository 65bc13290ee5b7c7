"""
Call interceptor: wraps any callable to add timing telemetry and an audit trail.

Order for every call:
  1. start timer
  2. invoke the wrapped operation
  3. log a timing record (success=True/False); failures are re-raised unmodified
  4. on success of an audited operation, build an AuditRecord
  5. hand it to the audit sink; audit failures are logged and discarded

The wrapped logic is unaware of either concern. Per-operation behaviour comes from
an OperationRegistry entry or an @instrumented tag, never from branches in here.
"""

import functools
import inspect
import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional, Sequence

from catalog.application.ports import ActorProvider, AuditSink
from catalog.core.context import operation_ctx
from catalog.domain.models.audit import ANONYMOUS_ACTOR, AuditRecord
from catalog.instrumentation.registry import (
    TIMED_ONLY,
    OperationRegistry,
    OperationSpec,
    get_operation_spec,
)
from catalog.observability.failure_classifier import FailureClassifier


def render_details(
    spec: OperationSpec,
    method_name: str,
    args: Sequence[Any],
    kwargs: Mapping[str, Any],
) -> str:
    """
    "<details> | method=<name>, args=[a, b, k=v]". Arguments are rendered with str()
    and are neither truncated nor redacted.
    """
    details = f"{spec.details} | " if spec.details.strip() else ""
    details += f"method={method_name}"
    rendered = [str(a) for a in args] + [f"{k}={v}" for k, v in kwargs.items()]
    if rendered:
        details += ", args=[" + ", ".join(rendered) + "]"
    return details


def resolve_actor(provider: Optional[ActorProvider], logger: Optional[logging.Logger] = None) -> str:
    """Actor name from the provider; exceptions, None and blanks all become "-"."""
    if provider is None:
        return ANONYMOUS_ACTOR
    try:
        name = provider.current_actor_name()
    except Exception as e:
        if logger is not None:
            logger.debug("actor_resolution_failed", extra={"error": str(e)})
        return ANONYMOUS_ACTOR
    if name is None or not str(name).strip():
        return ANONYMOUS_ACTOR
    return str(name)


class Interceptor:
    """
    Applies timing and audit to named operations. Works for plain and async callables.
    Depends only on an audit sink and an actor provider; pass an AuditDispatcher as the
    sink to keep persistence off the caller's path.
    """

    def __init__(
        self,
        audit_sink: AuditSink,
        actor_provider: Optional[ActorProvider] = None,
        *,
        registry: Optional[OperationRegistry] = None,
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], float] = time.perf_counter,
        now: Optional[Callable[[], datetime]] = None,
        metrics_callback: Any = None,
    ) -> None:
        self._audit_sink = audit_sink
        self._actor_provider = actor_provider
        self._registry = registry or OperationRegistry()
        self._logger = logger or logging.getLogger(__name__)
        self._clock = clock
        self._now = now or (lambda: datetime.now(timezone.utc))
        self._metrics = metrics_callback

    @property
    def registry(self) -> OperationRegistry:
        return self._registry

    def with_actor(self, actor_provider: Optional[ActorProvider]) -> "Interceptor":
        """Same sink, registry and clocks, different actor context."""
        return Interceptor(
            self._audit_sink,
            actor_provider,
            registry=self._registry,
            logger=self._logger,
            clock=self._clock,
            now=self._now,
            metrics_callback=self._metrics,
        )

    def resolve_spec(
        self,
        operation: str,
        func: Callable[..., Any],
        spec: Optional[OperationSpec] = None,
    ) -> OperationSpec:
        """Explicit spec, then registry entry, then @instrumented tag, else timed only."""
        if spec is not None:
            return spec
        return self._registry.lookup(operation) or get_operation_spec(func) or TIMED_ONLY

    def invoke(
        self,
        operation: str,
        func: Callable[..., Any],
        args: Sequence[Any] = (),
        kwargs: Optional[Mapping[str, Any]] = None,
        spec: Optional[OperationSpec] = None,
    ) -> Any:
        """Run a synchronous operation through the chain and return its result."""
        kwargs = dict(kwargs or {})
        resolved = self.resolve_spec(operation, func, spec)
        token = operation_ctx.set(operation)
        start = self._clock()
        try:
            result = func(*args, **kwargs)
        except BaseException as exc:
            self._record_timing(operation, start, success=False, error=exc)
            raise
        finally:
            operation_ctx.reset(token)
        self._record_timing(operation, start, success=True)
        self._audit(operation, func, resolved, args, kwargs)
        return result

    async def ainvoke(
        self,
        operation: str,
        func: Callable[..., Any],
        args: Sequence[Any] = (),
        kwargs: Optional[Mapping[str, Any]] = None,
        spec: Optional[OperationSpec] = None,
    ) -> Any:
        """Async counterpart of invoke(); awaits the operation inside the timed region."""
        kwargs = dict(kwargs or {})
        resolved = self.resolve_spec(operation, func, spec)
        token = operation_ctx.set(operation)
        start = self._clock()
        try:
            result = await func(*args, **kwargs)
        except BaseException as exc:
            self._record_timing(operation, start, success=False, error=exc)
            raise
        finally:
            operation_ctx.reset(token)
        self._record_timing(operation, start, success=True)
        self._audit(operation, func, resolved, args, kwargs)
        return result

    def wrap(
        self,
        func: Callable[..., Any],
        operation: Optional[str] = None,
        spec: Optional[OperationSpec] = None,
    ) -> Callable[..., Any]:
        """Return a callable with func's signature that routes every call through the chain."""
        name = operation or getattr(func, "__qualname__", repr(func))

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await self.ainvoke(name, func, args, kwargs, spec)

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return self.invoke(name, func, args, kwargs, spec)

        return wrapper

    def _record_timing(
        self,
        operation: str,
        start: float,
        *,
        success: bool,
        error: Optional[BaseException] = None,
    ) -> None:
        duration_ms = (self._clock() - start) * 1000.0
        extra: dict[str, Any] = {
            "operation": operation,
            "duration_ms": duration_ms,
            "success": success,
        }
        if error is not None:
            extra["error_type"] = type(error).__name__
            extra["failure_category"] = FailureClassifier.classify(error).value
        self._logger.info("operation_timed", extra=extra)
        if self._metrics and hasattr(self._metrics, "observe_latency"):
            try:
                self._metrics.observe_latency(operation, duration_ms)
            except Exception as e:
                self._logger.warning(
                    "operation_metrics_failed",
                    extra={"operation": operation, "error": str(e)},
                )

    def _audit(
        self,
        operation: str,
        func: Callable[..., Any],
        spec: OperationSpec,
        args: Sequence[Any],
        kwargs: Mapping[str, Any],
    ) -> None:
        if not spec.audited or spec.action is None:
            return
        method_name = getattr(func, "__name__", None) or operation.rsplit(".", 1)[-1]
        try:
            record = AuditRecord(
                actor=resolve_actor(self._actor_provider, self._logger),
                action=spec.action,
                details=render_details(spec, method_name, args, kwargs),
                timestamp=self._now(),
            )
            self._audit_sink.append(record)
        except Exception as e:
            self._logger.error(
                "audit_dispatch_failed",
                extra={"operation": operation, "error": str(e), "error_type": type(e).__name__},
            )
            # Do not re-raise: the caller's result stands.

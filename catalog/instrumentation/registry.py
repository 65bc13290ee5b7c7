"""Declarative per-operation metadata: the @instrumented tag and an explicit registry."""

import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from catalog.domain.models.audit import AuditAction

F = TypeVar("F", bound=Callable[..., Any])

OPERATION_SPEC_ATTR = "__operation_spec__"


@dataclass(frozen=True)
class OperationSpec:
    """
    How the interceptor treats one operation. Every intercepted call is timed;
    audited operations additionally emit an AuditRecord on success.
    """

    audited: bool = False
    action: Optional[AuditAction] = None
    details: str = ""

    def __post_init__(self) -> None:
        if self.audited and self.action is None:
            raise ValueError("audited operations require an action")

    @classmethod
    def audit(cls, action: AuditAction, details: str = "") -> "OperationSpec":
        return cls(audited=True, action=action, details=details)


TIMED_ONLY = OperationSpec()


def instrumented(action: Optional[AuditAction] = None, *, details: str = "") -> Callable[[F], F]:
    """
    Tag a function or method with its OperationSpec. The function itself is returned
    unchanged; the tag is read when the callable is wrapped by an Interceptor.

        @instrumented(AuditAction.CREATE, details="catalog")
        async def create(self, product): ...
    """
    spec = OperationSpec.audit(action, details) if action is not None else TIMED_ONLY

    def decorator(func: F) -> F:
        setattr(func, OPERATION_SPEC_ATTR, spec)
        return func

    return decorator


def get_operation_spec(func: Callable[..., Any]) -> Optional[OperationSpec]:
    """Return the tag on func (bound methods resolve through to the function), or None."""
    return getattr(func, OPERATION_SPEC_ATTR, None)


class OperationRegistry:
    """
    Explicit operation name -> OperationSpec configuration. Entries here take precedence
    over @instrumented tags, so operations can opt in without touching their source.
    Thread-safe.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._specs: dict[str, OperationSpec] = {}

    def register(self, operation: str, spec: OperationSpec) -> None:
        with self._lock:
            self._specs[operation] = spec

    def register_audited(self, operation: str, action: AuditAction, details: str = "") -> None:
        self.register(operation, OperationSpec.audit(action, details))

    def lookup(self, operation: str) -> Optional[OperationSpec]:
        with self._lock:
            return self._specs.get(operation)

    def __contains__(self, operation: object) -> bool:
        with self._lock:
            return operation in self._specs

    def __len__(self) -> int:
        with self._lock:
            return len(self._specs)

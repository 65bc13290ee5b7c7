"""Object-level instrumentation: a proxy that routes public method calls through an Interceptor."""

import inspect
from typing import Any, FrozenSet, Optional, TypeVar

from catalog.instrumentation.exceptions import OperationNotResolvableError
from catalog.instrumentation.interceptor import Interceptor

T = TypeVar("T")


def interface_operations(interface: type) -> FrozenSet[str]:
    """Public callables declared by an interface class (ABC, Protocol or plain class)."""
    return frozenset(
        name
        for name, member in inspect.getmembers(interface)
        if not name.startswith("_") and callable(member)
    )


class InstrumentedProxy:
    """
    Stands in for target. Public methods come back wrapped by the interceptor and are
    named "<Type>.<method>". With an interface, only its operations are exposed and each
    must exist on the concrete target; a missing one raises OperationNotResolvableError
    when it is dispatched.
    """

    def __init__(
        self,
        target: Any,
        interceptor: Interceptor,
        interface: Optional[type] = None,
    ) -> None:
        self._target = target
        self._interceptor = interceptor
        self._interface = interface
        self._operations = interface_operations(interface) if interface is not None else None
        self._type_name = interface.__name__ if interface is not None else type(target).__name__

    @property
    def target(self) -> Any:
        return self._target

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not set in __init__.
        if self._operations is not None:
            if name not in self._operations:
                raise AttributeError(f"{self._type_name} has no operation '{name}'")
            member = getattr(self._target, name, None)
            if member is None or not callable(member):
                raise OperationNotResolvableError(name, self._target)
        else:
            member = getattr(self._target, name)
            if name.startswith("_") or not callable(member):
                return member
        return self._interceptor.wrap(member, operation=f"{self._type_name}.{name}")

    def __repr__(self) -> str:
        return f"InstrumentedProxy({self._target!r})"


def instrument(
    target: T,
    interceptor: Interceptor,
    interface: Optional[type] = None,
) -> T:
    """Wrap target so that every public call is timed and, where declared, audited."""
    return InstrumentedProxy(target, interceptor, interface)  # type: ignore[return-value]

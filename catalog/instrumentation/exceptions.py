"""Instrumentation-layer exceptions. Raised only for wiring defects, never for audit or timing failures."""


class InstrumentationError(Exception):
    """Base for all instrumentation-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class OperationNotResolvableError(InstrumentationError):
    """
    Raised when a proxied interface declares an operation the concrete target does not implement.
    Signals a wiring bug, not a business failure.
    """

    def __init__(self, operation: str, target: object) -> None:
        self.operation = operation
        self.target_type = type(target).__name__
        super().__init__(
            f"Operation '{operation}' not found on implementation {self.target_type}"
        )

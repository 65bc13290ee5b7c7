"""Immutable audit record model. Domain-level immutability."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict

ANONYMOUS_ACTOR = "-"


class AuditAction(str, Enum):
    """Operation tag recorded with each audit record."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"
    SEARCH = "SEARCH"


@dataclass(frozen=True)
class AuditRecord:
    """
    Immutable audit record: who (actor), what (action, details), when (UTC).
    Built once a wrapped operation has returned successfully.
    """

    actor: str
    action: AuditAction
    details: str
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Structured representation for JSON logging."""
        return {
            "actor": self.actor,
            "action": self.action.value,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }

    def format(self) -> str:
        """Single-line rendering used by the file sink."""
        return f"{self.timestamp.isoformat()} | {self.actor} | {self.action.value} | {self.details}"

"""Domain model for catalog users."""

from dataclasses import dataclass, field
from enum import Enum


class Role(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


@dataclass
class User:
    """Registered user. password_hash is never rendered in str()/repr()."""

    username: str
    password_hash: str = field(repr=False)
    role: Role = Role.USER

    def __str__(self) -> str:
        return f"{self.username} ({self.role.value})"

"""Explicit actor context. Replaces any process-wide "current user" state."""

import threading
from typing import Optional

from catalog.domain.models.user import User


class UserSession:
    """
    Login context owned by whoever drives the service (a request handler, a console loop).
    It is passed explicitly to the interceptor as its actor provider; nothing global.
    """

    def __init__(self, user: Optional[User] = None) -> None:
        self._lock = threading.Lock()
        self._user = user

    @property
    def user(self) -> Optional[User]:
        with self._lock:
            return self._user

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def sign_in(self, user: User) -> None:
        with self._lock:
            self._user = user

    def sign_out(self) -> Optional[User]:
        with self._lock:
            user, self._user = self._user, None
            return user

    def current_actor_name(self) -> Optional[str]:
        user = self.user
        return user.username if user is not None else None

    def __str__(self) -> str:
        return f"UserSession(user={self.current_actor_name() or '-'})"


class StaticActorProvider:
    """Fixed actor, e.g. for batch jobs or a request whose caller is already authenticated upstream."""

    def __init__(self, actor: Optional[str]) -> None:
        self._actor = actor

    def current_actor_name(self) -> Optional[str]:
        return self._actor

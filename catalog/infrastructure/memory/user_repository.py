"""In-memory user repository. Implements UserRepository protocol."""

import threading
from dataclasses import replace
from typing import Dict, Iterable, Optional

from catalog.domain.models.user import User


class InMemoryUserRepository:
    """Users keyed by username."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._lock = threading.Lock()
        self._users: Dict[str, User] = {u.username: replace(u) for u in users}

    async def find_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(username)
            return replace(user) if user is not None else None

    async def save(self, user: User) -> User:
        with self._lock:
            self._users[user.username] = replace(user)
        return user

    async def exists(self, username: str) -> bool:
        with self._lock:
            return username in self._users

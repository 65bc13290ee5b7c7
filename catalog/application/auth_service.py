"""Authentication service: register, login and logout against an explicit UserSession."""

import logging
import secrets
from typing import Optional

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from catalog.application.exceptions import UsernameTakenError
from catalog.application.ports import UserRepository
from catalog.application.session import UserSession
from catalog.domain.models.audit import AuditAction
from catalog.domain.models.user import Role, User
from catalog.domain.validators import validate_credentials
from catalog.instrumentation.registry import instrumented

PBKDF2_ITERATIONS = 100_000


def _kdf(salt: bytes) -> PBKDF2HMAC:
    return PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=PBKDF2_ITERATIONS,
    )


def hash_password(password: str, salt: Optional[bytes] = None) -> str:
    """PBKDF2-SHA256, stored as "<salt hex>$<digest hex>"."""
    salt = salt or secrets.token_bytes(16)
    digest = _kdf(salt).derive(password.encode("utf-8"))
    return f"{salt.hex()}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        salt_hex, digest_hex = stored.split("$", 1)
        salt, digest = bytes.fromhex(salt_hex), bytes.fromhex(digest_hex)
    except ValueError:
        return False
    try:
        _kdf(salt).verify(password.encode("utf-8"), digest)
    except InvalidKey:
        return False
    return True


class AuthService:
    """
    Keeps no "current user" of its own: login/logout act on the UserSession the caller
    passes in, and that session doubles as the actor provider for auditing.
    """

    def __init__(self, repository: UserRepository, logger: Optional[logging.Logger] = None) -> None:
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    @instrumented(AuditAction.CREATE, details="register user")
    async def register(self, username: str, password: str, role: Role = Role.USER) -> User:
        """Raises DomainValidationError for blank credentials, UsernameTakenError for duplicates."""
        validate_credentials(username, password)
        username = username.strip()
        if await self._repository.exists(username):
            raise UsernameTakenError(f"Username already taken: {username}")
        user = await self._repository.save(
            User(username=username, password_hash=hash_password(password), role=role)
        )
        self._logger.info("user_registered", extra={"username": username, "role": role.value})
        return user

    @instrumented(AuditAction.LOGIN)
    async def login(self, session: UserSession, username: str, password: str) -> Optional[User]:
        """Sign the session in on valid credentials; None otherwise."""
        user = await self._repository.find_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            self._logger.info("login_rejected", extra={"username": username})
            return None
        session.sign_in(user)
        return user

    @instrumented(AuditAction.LOGOUT)
    async def logout(self, session: UserSession) -> None:
        session.sign_out()

    @instrumented()
    async def exists(self, username: str) -> bool:
        return await self._repository.exists(username)

"""AuthService: registration, login/logout against an explicit session, password hashing."""

import pytest

from catalog.application.auth_service import AuthService, hash_password, verify_password
from catalog.application.exceptions import UsernameTakenError
from catalog.application.session import UserSession
from catalog.domain.exceptions import DomainValidationError
from catalog.domain.models.user import Role
from catalog.infrastructure.memory.user_repository import InMemoryUserRepository


@pytest.fixture
def auth_service(logger):
    return AuthService(repository=InMemoryUserRepository(), logger=logger)


def test_hash_is_salted_and_verifiable():
    """Same password hashes differently per salt; only the right password verifies."""
    first = hash_password("s3cret")
    second = hash_password("s3cret")
    assert first != second
    assert verify_password("s3cret", first)
    assert not verify_password("wrong", first)


def test_verify_rejects_malformed_hash():
    """Stored hashes without a separator or with non-hex parts fail verification."""
    assert verify_password("anything", "not-a-hash") is False
    assert verify_password("anything", "zz$abcd") is False


@pytest.mark.asyncio
async def test_register_stores_hashed_password(auth_service):
    """Username is trimmed, role kept, and the password never stored in clear."""
    user = await auth_service.register("  alice ", "pw", Role.ADMIN)
    assert user.username == "alice"
    assert user.role == Role.ADMIN
    assert user.password_hash != "pw"
    assert await auth_service.exists("alice")


@pytest.mark.asyncio
async def test_register_duplicate_is_conflict(auth_service):
    """A taken username raises UsernameTakenError."""
    await auth_service.register("bob", "pw")
    with pytest.raises(UsernameTakenError):
        await auth_service.register("bob", "other")


@pytest.mark.asyncio
@pytest.mark.parametrize("username,password", [("", "pw"), ("carol", " ")])
async def test_register_blank_credentials_rejected(auth_service, username, password):
    """Blank username or password is a validation error."""
    with pytest.raises(DomainValidationError):
        await auth_service.register(username, password)


@pytest.mark.asyncio
async def test_login_signs_session_in_and_logout_out(auth_service):
    """Login sets the session user; logout clears it."""
    await auth_service.register("dave", "pw")
    session = UserSession()

    user = await auth_service.login(session, "dave", "pw")
    assert user is not None
    assert session.current_actor_name() == "dave"

    await auth_service.logout(session)
    assert session.current_actor_name() is None
    assert not session.is_authenticated


@pytest.mark.asyncio
async def test_login_with_bad_credentials_returns_none(auth_service, logger):
    """Wrong password or unknown user returns None and leaves the session anonymous."""
    await auth_service.register("erin", "pw")
    session = UserSession()
    assert await auth_service.login(session, "erin", "nope") is None
    assert await auth_service.login(session, "nobody", "pw") is None
    assert not session.is_authenticated
    logger.info.assert_any_call("login_rejected", extra={"username": "nobody"})

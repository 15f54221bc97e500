"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory fakes for the user store and the mail transport, and an
AuthService wired to them.
"""

import asyncio
from datetime import datetime, timezone
from typing import Optional

import pytest

from api.dependencies import reset_container
from modules.auth.exceptions import DuplicateUsernameError
from modules.auth.models import User
from modules.auth.passwords import PasswordHasher
from modules.auth.service import AuthService
from modules.auth.tokens import TokenIssuer
from modules.notifications.exceptions import NotificationDeliveryError
from shared.config import get_settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# Lowest work factor bcrypt accepts; keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


class InMemoryUserRepository:
    """
    User store fake that enforces username uniqueness at insert time.

    Each call yields to the event loop first, so concurrent signups
    interleave between the existence check and the insert the way they
    would against a real store.
    """

    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self.find_calls: list[str] = []
        self.insert_calls: list[str] = []

    async def find_by_username(self, username: str) -> Optional[User]:
        self.find_calls.append(username)
        await asyncio.sleep(0)
        return self.users.get(username)

    async def insert(self, username: str, email: str, password_hash: str) -> User:
        self.insert_calls.append(username)
        await asyncio.sleep(0)
        if username in self.users:
            raise DuplicateUsernameError(username)
        user = User(
            id=str(len(self.users) + 1),
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
        )
        self.users[username] = user
        return user


class FakeNotifier:
    """Mail transport fake that records welcome messages or fails on demand."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[tuple[str, str]] = []

    async def send_welcome(self, email: str, username: str) -> None:
        if self.fail:
            raise NotificationDeliveryError(email, "simulated transport failure")
        self.sent.append((email, username))


def create_test_token(
    username: str = "test-user",
    secret: str = TEST_JWT_SECRET,
    issued_at: Optional[datetime] = None,
) -> str:
    """
    Create a test bearer token.

    Args:
        username: Subject to include in the token
        secret: Signing secret
        issued_at: Issuance time; defaults to now

    Returns:
        Encoded token string
    """
    clock = (lambda: issued_at) if issued_at is not None else None
    return TokenIssuer(secret, clock=clock).issue(username).access_token


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container, client cache and settings around each test."""
    reset_container()
    reset_client_cache()
    get_settings.cache_clear()
    yield
    reset_container()
    reset_client_cache()
    get_settings.cache_clear()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(TEST_JWT_SECRET)


@pytest.fixture
def auth_service(user_repository, hasher, token_issuer, notifier) -> AuthService:
    """AuthService wired to in-memory collaborators."""
    return AuthService(
        users=user_repository,
        hasher=hasher,
        tokens=token_issuer,
        notifier=notifier,
    )


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}

"""
Authentication module interface.

Other modules and the API layer should depend on IAuthService, not the
concrete implementation. The collaborator protocols below are what
AuthService itself depends on, which keeps it testable with fakes.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    IssuedToken,
    SigninRequest,
    SigninResult,
    SignupRequest,
    SignupResult,
    TokenClaims,
    User,
)


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    signup and signin return result objects for every expected outcome;
    they raise only on infrastructure faults.
    """

    async def signup(self, request: SignupRequest) -> SignupResult:
        """
        Register a new account and send the welcome email.

        Returns:
            SignupResult with status ``ok`` or ``taken``

        Raises:
            UserStoreError: If the user store is unavailable
        """
        ...

    async def signin(self, request: SigninRequest) -> SigninResult:
        """
        Check credentials and issue a bearer token.

        Returns:
            SigninResult with status ``ok``, ``not_found`` or
            ``invalid_credentials``

        Raises:
            UserStoreError: If the user store is unavailable
            SigningError: If the token secret is not configured
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a bearer token and return the authenticated user.

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...


@runtime_checkable
class IUserRepository(Protocol):
    """Persistent user directory keyed by unique username."""

    async def find_by_username(self, username: str) -> Optional[User]:
        ...

    async def insert(self, username: str, email: str, password_hash: str) -> User:
        """Raises DuplicateUsernameError if the username already exists."""
        ...


@runtime_checkable
class IPasswordHasher(Protocol):
    """One-way password hashing."""

    async def hash_async(self, password: str) -> str:
        ...

    async def verify_async(self, password: str, password_hash: str) -> bool:
        ...


@runtime_checkable
class ITokenIssuer(Protocol):
    """Signs and validates bearer tokens."""

    def issue(self, username: str) -> IssuedToken:
        ...

    def decode(self, token: Optional[str]) -> TokenClaims:
        ...

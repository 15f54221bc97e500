"""
Authentication module.

Handles signup, signin, password hashing and bearer token issuance.

Public API:
- IAuthService: Interface for auth operations
- SignupRequest/SignupResult, SigninRequest/SigninResult: Flow models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService, IUserRepository
from .models import (
    User,
    TokenClaims,
    IssuedToken,
    SignupRequest,
    SignupResult,
    SignupStatus,
    SigninRequest,
    SigninResult,
    SigninStatus,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    SigningError,
    DuplicateUsernameError,
    UserStoreError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserRepository",
    # Models
    "User",
    "TokenClaims",
    "IssuedToken",
    "SignupRequest",
    "SignupResult",
    "SignupStatus",
    "SigninRequest",
    "SigninResult",
    "SigninStatus",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "SigningError",
    "DuplicateUsernameError",
    "UserStoreError",
]

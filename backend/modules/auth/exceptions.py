"""
Authentication module exceptions.

Only infrastructure faults and token problems are exceptions here.
Expected signup/signin outcomes (taken, not found, bad password) are
returned as result variants by AuthService, see models.py.
"""

from shared.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ExternalServiceError,
    StorefrontError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a bearer token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class SigningError(ConfigurationError):
    """Raised when a token cannot be signed (secret key absent or invalid)."""

    def __init__(self, message: str = "Token signing is not configured"):
        super().__init__(message, code="SIGNING_ERROR")


class DuplicateUsernameError(StorefrontError):
    """
    Raised by the user repository when the username unique constraint fires.

    AuthService translates this into the ``taken`` signup outcome.
    """

    def __init__(self, username: str):
        super().__init__(
            f"Username already exists: {username}",
            code="DUPLICATE_USERNAME",
            details={"username": username},
        )


class UserStoreError(ExternalServiceError):
    """Raised when the user store fails for any reason other than a duplicate."""

    def __init__(self, operation: str, original_error: str):
        super().__init__(
            f"User store failure during {operation}",
            service="supabase",
            code="USER_STORE_ERROR",
            details={"operation": operation, "original_error": original_error},
        )

"""
Bearer token issuing and decoding.

Tokens are stateless HS256 JWTs signed with the process-wide secret.
Nothing is stored server-side; a token is valid while its signature
checks out and ``exp`` has not passed.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from .exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    SigningError,
)
from .models import IssuedToken, TokenClaims

TOKEN_LIFETIME = timedelta(hours=1)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """
    Signs and decodes bearer tokens.

    The clock is injectable so issuance time can be pinned in tests.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        lifetime: timedelta = TOKEN_LIFETIME,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = lifetime
        self._clock = clock or _utcnow

    def issue(self, username: str) -> IssuedToken:
        """
        Issue a token for ``username``.

        Returns:
            IssuedToken with the encoded JWT and its expiry

        Raises:
            SigningError: If the secret key is missing or unusable
        """
        if not self._secret:
            raise SigningError("JWT_SECRET is not configured")

        issued_at = self._clock()
        expires_at = issued_at + self._lifetime
        payload = {
            "sub": username,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }

        try:
            token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
            raise SigningError(f"Token signing failed: {e}") from e

        return IssuedToken(access_token=token, expires_at=expires_at)

    def decode(self, token: Optional[str]) -> TokenClaims:
        """
        Validate signature and expiry and return the claims.

        Raises:
            MissingTokenError: If no token was given
            ExpiredTokenError: If ``exp`` has passed
            InvalidTokenError: For any other validation failure
        """
        if not token:
            raise MissingTokenError()
        if not self._secret:
            raise SigningError("JWT_SECRET is not configured")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        return TokenClaims(**payload)

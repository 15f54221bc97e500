"""
Authentication service implementation.

Orchestrates signup (existence check, hash, insert, welcome email) and
signin (lookup, verify, issue token). Collaborators are injected; the
service keeps no state between requests.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from modules.notifications.exceptions import NotificationDeliveryError
from modules.notifications.interfaces import INotificationSender
from shared.models import AuthenticatedUser

from .exceptions import DuplicateUsernameError
from .interfaces import IAuthService, IPasswordHasher, ITokenIssuer, IUserRepository
from .models import SigninRequest, SigninResult, SignupRequest, SignupResult

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    The existence check in signup is only an early exit. Two concurrent
    signups can both pass it; the store's unique constraint decides and
    the loser gets the same ``taken`` outcome.
    """

    def __init__(
        self,
        users: IUserRepository,
        hasher: IPasswordHasher,
        tokens: ITokenIssuer,
        notifier: INotificationSender,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens
        self._notifier = notifier

    async def signup(self, request: SignupRequest) -> SignupResult:
        existing = await self._users.find_by_username(request.username)
        if existing is not None:
            logger.info("Signup rejected, username %s already exists", request.username)
            return SignupResult.taken()

        password_hash = await self._hasher.hash_async(request.password)

        try:
            await self._users.insert(request.username, str(request.email), password_hash)
        except DuplicateUsernameError:
            logger.info("Signup for %s lost the insert race", request.username)
            return SignupResult.taken()

        logger.info("Registered user %s", request.username)
        notification_sent = await self._send_welcome(str(request.email), request.username)
        return SignupResult.ok(notification_sent=notification_sent)

    async def signin(self, request: SigninRequest) -> SigninResult:
        user = await self._users.find_by_username(request.username)
        if user is None:
            return SigninResult.not_found()

        if not await self._hasher.verify_async(request.password, user.password_hash):
            logger.info("Signin failed for %s: wrong password", request.username)
            return SigninResult.invalid_credentials()

        issued = self._tokens.issue(user.username)
        logger.info("Issued token for %s", user.username)
        return SigninResult.ok(issued)

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        claims = self._tokens.decode(token)
        return AuthenticatedUser(
            username=claims.sub,
            issued_at=datetime.fromtimestamp(claims.iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(claims.exp, tz=timezone.utc),
        )

    async def _send_welcome(self, email: str, username: str) -> bool:
        """Send the welcome email; a delivery failure never fails signup."""
        try:
            await self._notifier.send_welcome(email, username)
        except NotificationDeliveryError as e:
            logger.warning(
                "Welcome email for %s not delivered: %s",
                username,
                e.details.get("original_error", e.message),
            )
            return False
        return True

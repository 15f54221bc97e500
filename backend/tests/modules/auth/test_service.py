"""
Tests for AuthService.

Covers the signup and signin flows against in-memory collaborators,
including concurrent signups racing on the same username.
"""

import asyncio
from datetime import timedelta

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from pydantic import SecretStr

from modules.auth.exceptions import DuplicateUsernameError, ExpiredTokenError, UserStoreError
from modules.auth.models import SigninRequest, SigninStatus, SignupRequest, SignupStatus
from modules.auth.service import AuthService
from modules.auth.tokens import TokenIssuer
from modules.notifications.service import EmailNotificationSender
from shared.config import Settings

from tests.conftest import TEST_JWT_SECRET, FakeNotifier, create_test_token


def signup_request(username="alice", email="a@x.com", password="secret1") -> SignupRequest:
    return SignupRequest(username=username, email=email, password=password)


def signin_request(username="alice", password="secret1") -> SigninRequest:
    return SigninRequest(username=username, password=password)


class TestSignup:
    @pytest.mark.asyncio
    async def test_signup_stores_hashed_password(self, auth_service, user_repository, hasher):
        result = await auth_service.signup(signup_request())

        assert result.status == SignupStatus.OK
        stored = user_repository.users["alice"]
        assert stored.email == "a@x.com"
        assert stored.password_hash != "secret1"
        assert hasher.verify("secret1", stored.password_hash)

    @pytest.mark.asyncio
    async def test_signup_sends_welcome(self, auth_service, notifier):
        result = await auth_service.signup(signup_request())

        assert result.notification_sent is True
        assert notifier.sent == [("a@x.com", "alice")]

    @pytest.mark.asyncio
    async def test_sequential_duplicate_is_taken(self, auth_service, user_repository):
        first = await auth_service.signup(signup_request())
        second = await auth_service.signup(signup_request(email="other@x.com", password="other"))

        assert first.status == SignupStatus.OK
        assert second.status == SignupStatus.TAKEN
        assert len(user_repository.users) == 1
        assert user_repository.users["alice"].email == "a@x.com"
        # rejected by the existence check, never reaches insert
        assert user_repository.insert_calls == ["alice"]

    @pytest.mark.asyncio
    async def test_concurrent_signups_create_one_user(self, auth_service, user_repository):
        results = await asyncio.gather(
            auth_service.signup(signup_request(email="one@x.com")),
            auth_service.signup(signup_request(email="two@x.com")),
        )

        statuses = sorted(r.status.value for r in results)
        assert statuses == ["ok", "taken"]
        assert len(user_repository.users) == 1

    @pytest.mark.asyncio
    async def test_insert_race_maps_to_taken(self, hasher, token_issuer, notifier):
        """A unique violation at insert time is the same outcome as the early check."""
        users = MagicMock()
        users.find_by_username = AsyncMock(return_value=None)
        users.insert = AsyncMock(side_effect=DuplicateUsernameError("alice"))
        service = AuthService(users=users, hasher=hasher, tokens=token_issuer, notifier=notifier)

        result = await service.signup(signup_request())

        assert result.status == SignupStatus.TAKEN
        assert result.notification_sent is None
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_taken_skips_hash_and_email(self, user_repository, token_issuer, notifier):
        hasher = MagicMock()
        hasher.hash_async = AsyncMock(return_value="hash")
        service = AuthService(
            users=user_repository, hasher=hasher, tokens=token_issuer, notifier=notifier
        )
        await service.signup(signup_request())
        hasher.hash_async.reset_mock()
        notifier.sent.clear()

        result = await service.signup(signup_request())

        assert result.status == SignupStatus.TAKEN
        hasher.hash_async.assert_not_called()
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_fail_signup(
        self, user_repository, hasher, token_issuer
    ):
        service = AuthService(
            users=user_repository,
            hasher=hasher,
            tokens=token_issuer,
            notifier=FakeNotifier(fail=True),
        )

        result = await service.signup(signup_request())

        assert result.status == SignupStatus.OK
        assert result.notification_sent is False
        assert "alice" in user_repository.users

        signin = await service.signin(signin_request())
        assert signin.status == SigninStatus.OK

    @pytest.mark.asyncio
    async def test_smtp_login_error_does_not_fail_signup(
        self, user_repository, hasher, token_issuer
    ):
        settings = Settings(
            _env_file=None,
            smtp_enabled=True,
            smtp_host="smtp.example.com",
            smtp_user="mailer@example.com",
            smtp_password=SecretStr("p\u00e4ssw\u00f6rd"),
        )
        service = AuthService(
            users=user_repository,
            hasher=hasher,
            tokens=token_issuer,
            notifier=EmailNotificationSender(settings),
        )

        with patch("modules.notifications.service.smtplib.SMTP_SSL") as mock_smtp:
            server = mock_smtp.return_value.__enter__.return_value
            server.login.side_effect = UnicodeEncodeError(
                "ascii", "p\u00e4ssw\u00f6rd", 1, 2, "ordinal not in range(128)"
            )
            result = await service.signup(signup_request())

        assert result.status == SignupStatus.OK
        assert result.notification_sent is False
        assert "alice" in user_repository.users

    @pytest.mark.asyncio
    async def test_store_fault_propagates(self, hasher, token_issuer, notifier):
        users = MagicMock()
        users.find_by_username = AsyncMock(
            side_effect=UserStoreError("find_by_username", "connection refused")
        )
        service = AuthService(users=users, hasher=hasher, tokens=token_issuer, notifier=notifier)

        with pytest.raises(UserStoreError):
            await service.signup(signup_request())


class TestSignin:
    @pytest.mark.asyncio
    async def test_unknown_user_is_not_found(self, user_repository, token_issuer, notifier):
        hasher = MagicMock()
        hasher.verify_async = AsyncMock(return_value=True)
        tokens = MagicMock(wraps=token_issuer)
        service = AuthService(users=user_repository, hasher=hasher, tokens=tokens, notifier=notifier)

        result = await service.signin(signin_request(username="nobody"))

        assert result.status == SigninStatus.NOT_FOUND
        assert result.token is None
        hasher.verify_async.assert_not_called()
        tokens.issue.assert_not_called()

    @pytest.mark.asyncio
    async def test_wrong_password_issues_no_token(self, user_repository, hasher, token_issuer, notifier):
        tokens = MagicMock(wraps=token_issuer)
        service = AuthService(users=user_repository, hasher=hasher, tokens=tokens, notifier=notifier)
        await service.signup(signup_request())

        result = await service.signin(signin_request(password="wrong"))

        assert result.status == SigninStatus.INVALID_CREDENTIALS
        assert result.token is None
        tokens.issue.assert_not_called()

    @pytest.mark.asyncio
    async def test_correct_password_issues_token(self, auth_service, token_issuer):
        await auth_service.signup(signup_request())

        result = await auth_service.signin(signin_request())

        assert result.status == SigninStatus.OK
        assert result.token_type == "bearer"
        claims = token_issuer.decode(result.token)
        assert claims.sub == "alice"
        assert claims.exp - claims.iat == 3600

    @pytest.mark.asyncio
    async def test_alice_scenario(self, auth_service, user_repository, notifier, token_issuer):
        """Full walk through: signup, duplicate, wrong password, unknown user, success."""
        first = await auth_service.signup(signup_request())
        assert first.status == SignupStatus.OK
        assert notifier.sent == [("a@x.com", "alice")]

        again = await auth_service.signup(signup_request(email="b@x.com", password="zzz"))
        assert again.status == SignupStatus.TAKEN
        assert len(user_repository.users) == 1

        wrong = await auth_service.signin(signin_request(password="nope"))
        assert wrong.status == SigninStatus.INVALID_CREDENTIALS

        unknown = await auth_service.signin(signin_request(username="bob"))
        assert unknown.status == SigninStatus.NOT_FOUND

        ok = await auth_service.signin(signin_request())
        assert ok.status == SigninStatus.OK
        assert token_issuer.decode(ok.token).sub == "alice"


class TestValidateToken:
    @pytest.mark.asyncio
    async def test_valid_token(self, auth_service):
        user = await auth_service.validate_token(create_test_token("alice"))

        assert user.username == "alice"
        assert user.expires_at - user.issued_at == timedelta(hours=1)

    @pytest.mark.asyncio
    async def test_expired_token(self, auth_service):
        issuer = TokenIssuer(TEST_JWT_SECRET, lifetime=timedelta(seconds=-10))
        token = issuer.issue("alice").access_token

        with pytest.raises(ExpiredTokenError):
            await auth_service.validate_token(token)

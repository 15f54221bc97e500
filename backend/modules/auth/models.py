"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

MAX_PASSWORD_BYTES = 72


class User(BaseModel):
    """A registered account as stored in the users table."""

    id: Optional[str] = Field(None, description="Store-generated ID")
    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="Notification address")
    password_hash: str = Field(..., description="bcrypt hash, never plaintext")
    created_at: Optional[datetime] = Field(None, description="Account creation time")

    model_config = {"frozen": True}


class TokenClaims(BaseModel):
    """
    Decoded bearer token payload.

    Tokens carry only the subject and the validity window.
    """

    sub: str = Field(..., description="Subject (username)")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class IssuedToken(BaseModel):
    """A freshly signed bearer token."""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------


class SignupRequest(BaseModel):
    """Signup payload. All fields are required and non-empty."""

    username: str = Field(..., min_length=1, max_length=64)
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("username")
    @classmethod
    def strip_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("username must not be blank")
        return value

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: str) -> str:
        # bcrypt only accepts up to 72 bytes
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class SigninRequest(BaseModel):
    """Signin payload."""

    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)

    @field_validator("username")
    @classmethod
    def strip_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("username must not be blank")
        return value


# -----------------------------------------------------------------------------
# Results
# -----------------------------------------------------------------------------


class SignupStatus(str, Enum):
    """Terminal signup outcomes."""

    OK = "ok"
    TAKEN = "taken"


class SigninStatus(str, Enum):
    """Terminal signin outcomes."""

    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID_CREDENTIALS = "invalid_credentials"


class SignupResult(BaseModel):
    """
    Outcome of a signup attempt.

    ``notification_sent`` is only set on success; a failed welcome email
    does not change the status.
    """

    status: SignupStatus
    notification_sent: Optional[bool] = None

    @classmethod
    def ok(cls, notification_sent: bool) -> "SignupResult":
        return cls(status=SignupStatus.OK, notification_sent=notification_sent)

    @classmethod
    def taken(cls) -> "SignupResult":
        return cls(status=SignupStatus.TAKEN)


class SigninResult(BaseModel):
    """Outcome of a signin attempt. Token fields are set only on success."""

    status: SigninStatus
    token: Optional[str] = None
    token_type: Optional[str] = None
    expires_at: Optional[datetime] = None

    @classmethod
    def ok(cls, issued: IssuedToken) -> "SigninResult":
        return cls(
            status=SigninStatus.OK,
            token=issued.access_token,
            token_type=issued.token_type,
            expires_at=issued.expires_at,
        )

    @classmethod
    def not_found(cls) -> "SigninResult":
        return cls(status=SigninStatus.NOT_FOUND)

    @classmethod
    def invalid_credentials(cls) -> "SigninResult":
        return cls(status=SigninStatus.INVALID_CREDENTIALS)

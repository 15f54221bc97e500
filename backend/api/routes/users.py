"""
User-related endpoints.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.models import AuthenticatedUser
from ..middleware.auth import get_current_user

router = APIRouter()


class UserProfileResponse(BaseModel):
    """Current user response model."""

    username: str
    expires_at: Optional[datetime] = None


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
) -> UserProfileResponse:
    """
    Get the user the bearer token was issued to.

    Requires authentication.
    """
    return UserProfileResponse(username=user.username, expires_at=user.expires_at)

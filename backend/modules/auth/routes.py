"""
Auth API endpoints.

Signup and signin always answer with a body carrying ``status``. The
HTTP status code mirrors the outcome so clients can branch on either.
"""

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import (
    SigninRequest,
    SigninResult,
    SigninStatus,
    SignupRequest,
    SignupResult,
    SignupStatus,
)

router = APIRouter()

_SIGNIN_STATUS_CODES = {
    SigninStatus.OK: status.HTTP_200_OK,
    SigninStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    SigninStatus.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
}


@router.post(
    "/signup",
    response_model=SignupResult,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_409_CONFLICT: {"model": SignupResult}},
)
async def signup(
    request: SignupRequest,
    response: Response,
    service: IAuthService = Depends(get_auth_service),
) -> SignupResult:
    """
    Register a new account.

    A failed welcome email does not fail signup; it is reported as
    ``notification_sent: false``.
    """
    result = await service.signup(request)
    if result.status == SignupStatus.TAKEN:
        response.status_code = status.HTTP_409_CONFLICT
    return result


@router.post(
    "/signin",
    response_model=SigninResult,
    response_model_exclude_none=True,
    responses={
        status.HTTP_401_UNAUTHORIZED: {"model": SigninResult},
        status.HTTP_404_NOT_FOUND: {"model": SigninResult},
    },
)
async def signin(
    request: SigninRequest,
    response: Response,
    service: IAuthService = Depends(get_auth_service),
) -> SigninResult:
    """Exchange username and password for a one hour bearer token."""
    result = await service.signin(request)
    response.status_code = _SIGNIN_STATUS_CODES[result.status]
    return result

"""
Auth API endpoints.

Every response uses the ``{"success": ..., ...}`` envelope. Errors are
raised as auth exceptions and rendered by the API error handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import get_bearer_token, get_current_account
from shared.models import Account

from .interfaces import IAuthService
from .models import (
    AuthResponse,
    AuthResult,
    LoginRequest,
    LogoutRequest,
    LogoutResponse,
    MeResponse,
    SignupRequest,
)

router = APIRouter()


def _to_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        user=result.account,
        token=result.session.token,
        expires_at=result.session.expires_at,
    )


@router.post("/signup", response_model=AuthResponse)
async def signup(
    request: SignupRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Create an account and log it in.

    Returns the new account (without credentials), a bearer token and its expiry.
    """
    result = await service.signup(
        request.email,
        request.password,
        request.first_name,
        request.last_name,
    )
    return _to_response(result)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    result = await service.login(request.email, request.password)
    return _to_response(result)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    request: Optional[LogoutRequest] = None,
    bearer_token: Optional[str] = Depends(get_bearer_token),
    service: IAuthService = Depends(get_auth_service),
) -> LogoutResponse:
    """
    End a session.

    The token may come from the JSON body or the Authorization header.
    Always succeeds, even for unknown or expired tokens.
    """
    token = (request.token if request else None) or bearer_token
    await service.invalidate(token)
    return LogoutResponse()


@router.get("/me", response_model=MeResponse)
async def me(account: Account = Depends(get_current_account)) -> MeResponse:
    """Return the account that owns the presented bearer token."""
    return MeResponse(user=account)

"""
Bearer token authentication.

Extracts the opaque session token from the Authorization header and
resolves it through the auth service.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import NotAuthenticatedError
from modules.auth.interfaces import IAuthService
from shared.models import Account

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """Dependency that returns the raw bearer token, if any."""
    if credentials is None:
        return None
    return credentials.credentials


async def get_current_account(
    token: Optional[str] = Depends(get_bearer_token),
    auth: IAuthService = Depends(get_auth_service),
) -> Account:
    """
    Dependency that requires a live session.

    Usage:
        @router.get("/protected")
        async def protected_route(account: Account = Depends(get_current_account)):
            return {"user_id": account.id}
    """
    if not token:
        raise NotAuthenticatedError()
    return await auth.resolve(token)

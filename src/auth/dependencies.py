"""
FastAPI dependencies for authentication.
"""
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from src.auth.schemas import UserInfo
from src.auth.service import resolve_user
from src.utils.exceptions import AuthenticationError

# HTTP Bearer security scheme. Missing credentials are reported by
# get_current_user so that every 401 shares the same error body.
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> UserInfo:
    """
    Get the current authenticated user from the bearer token.

    Usage:
        @router.get("/protected")
        async def protected_endpoint(current_user: UserInfo = Depends(get_current_user)):
            return {"username": current_user.username}

    Raises:
        AuthenticationError: If the token is missing, expired, or invalid
    """
    if not credentials:
        raise AuthenticationError("Missing authentication token")

    return await resolve_user(credentials.credentials)

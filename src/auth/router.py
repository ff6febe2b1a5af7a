"""
Authentication router with login endpoint.
"""
from fastapi import APIRouter

from src.auth.schemas import LoginRequest, LoginResponse
from src.auth.service import authenticate

router = APIRouter(tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest) -> LoginResponse:
    """
    Authenticate user and return JWT token.

    Bad credentials surface as a 401 with a fixed message that does not
    reveal whether the username exists.
    """
    return await authenticate(request.username, request.password)

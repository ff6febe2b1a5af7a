"""
Pydantic schemas for authentication.
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.config import JWT_TOKEN_TYPE


class LoginRequest(BaseModel):
    """Login request schema."""
    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="User password")


class LoginResponse(BaseModel):
    """Login response schema with JWT token."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    token: str
    type: str = JWT_TOKEN_TYPE
    expires_in: int = Field(description="Token expiration time in seconds")


class UserInfo(BaseModel):
    """Authenticated user, passed explicitly to request handlers."""
    user_id: int
    username: str

"""
JWT utility functions for authentication.

Provides functions to create, decode, and validate bearer tokens. A token
carries the username as its subject together with issued-at and expiry
timestamps, and is signed with the configured secret.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel

from src.config import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRATION_MS
from src.utils.logger import get_current_logger


class TokenPayload(BaseModel):
    """JWT token payload schema."""
    sub: Optional[str] = None
    iat: Optional[datetime] = None
    exp: Optional[datetime] = None


def create_access_token(
    username: str,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a JWT access token.

    Args:
        username: The user's username, stored as the token subject
        expires_delta: Optional expiration time delta. Defaults to JWT_EXPIRATION_MS.

    Returns:
        Encoded JWT token string
    """
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(milliseconds=JWT_EXPIRATION_MS)

    payload = {
        "sub": username,
        "iat": now,
        "exp": now + expires_delta
    }

    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    """
    Decode a JWT token and return its payload.

    Args:
        token: The JWT token string

    Returns:
        Decoded payload dictionary

    Raises:
        jwt.ExpiredSignatureError: If the token has expired
        jwt.InvalidTokenError: If the token is invalid
    """
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])


def extract_username(token: str) -> str:
    """Return the subject of a verified token."""
    return decode_token(token).get("sub")


def extract_expiration(token: str) -> Optional[datetime]:
    """Return the expiry of a verified token as an aware datetime."""
    exp = decode_token(token).get("exp")
    return datetime.fromtimestamp(exp, tz=timezone.utc) if exp is not None else None


def validate_token(token: str, username: str) -> bool:
    """
    Validate a JWT token against a username.

    The token is valid when its signature verifies, its subject equals
    ``username`` and it has not expired. Any decoding failure is reported
    as an invalid token.

    Args:
        token: The JWT token string
        username: The username the token is expected to belong to

    Returns:
        True if the token is valid for the user, False otherwise
    """
    try:
        payload = decode_token(token)
    except jwt.PyJWTError as e:
        get_current_logger().warning(f"JWT validation failed: {e}")
        return False

    exp = payload.get("exp")
    if exp is None or datetime.fromtimestamp(exp, tz=timezone.utc) <= datetime.now(timezone.utc):
        return False
    return payload.get("sub") == username


def get_token_payload(token: str) -> Optional[TokenPayload]:
    """
    Get the full token payload as a Pydantic model.

    Args:
        token: The JWT token string

    Returns:
        TokenPayload if valid, None otherwise
    """
    try:
        payload = decode_token(token)
        return TokenPayload(
            sub=payload.get("sub"),
            iat=datetime.fromtimestamp(payload["iat"], tz=timezone.utc) if payload.get("iat") else None,
            exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc) if payload.get("exp") else None
        )
    except (jwt.ExpiredSignatureError, jwt.InvalidTokenError):
        return None


def get_expiration_in_seconds() -> int:
    """Token lifetime in seconds, as reported to clients at login."""
    return JWT_EXPIRATION_MS // 1000

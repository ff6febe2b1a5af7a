"""
Credential verification and token issuance.
"""
from typing import Optional

from passlib.context import CryptContext

from src.auth.schemas import LoginResponse, UserInfo
from src.config import JWT_TOKEN_TYPE
from src.data.models.db_entity.user import User
from src.data.postgres import user_ops
from src.data.postgres.connection import db_connection
from src.utils.exceptions import AuthenticationError
from src.utils.jwt_utils import create_access_token, get_expiration_in_seconds, get_token_payload, validate_token
from src.utils.logger import get_current_logger

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    """Hash a plain password."""
    return pwd_context.hash(password)


async def authenticate(username: str, password: str) -> LoginResponse:
    """
    Verify credentials and issue a bearer token.

    Raises:
        AuthenticationError: For an unknown user, a wrong password or an
            inactive account. The message is the same in every case.
    """
    logger = get_current_logger()

    async with db_connection.get_session() as session:
        user = await user_ops.find_by_username(session, username)

    if not user:
        # Keeps timing equal to the wrong-password branch
        pwd_context.dummy_verify()
        logger.warning(f"Login failed: user not found - {username}")
        raise AuthenticationError()

    if not verify_password(password, user.hashed_password):
        logger.warning(f"Login failed: invalid password - {username}")
        raise AuthenticationError()

    if not user.is_active:
        logger.warning(f"Login failed: inactive user - {username}")
        raise AuthenticationError()

    token = create_access_token(username=user.username)
    logger.debug(f"User {user.username} authenticated successfully")

    return LoginResponse(
        token=token,
        type=JWT_TOKEN_TYPE,
        expires_in=get_expiration_in_seconds(),
    )


async def resolve_user(token: str) -> UserInfo:
    """
    Load the user a bearer token belongs to.

    Raises:
        AuthenticationError: If the token is malformed, expired, signed with
            another secret, or names a user that no longer exists.
    """
    logger = get_current_logger()

    payload = get_token_payload(token)
    if payload is None or not payload.sub:
        raise AuthenticationError("Invalid or expired token")

    async with db_connection.get_session() as session:
        user = await user_ops.find_by_username(session, payload.sub)

    if user is None or not user.is_active:
        logger.warning(f"Token rejected: unknown or inactive user - {payload.sub}")
        raise AuthenticationError("Invalid or expired token")

    if not validate_token(token, user.username):
        raise AuthenticationError("Invalid or expired token")

    return UserInfo(user_id=user.id, username=user.username)


async def create_user(username: str, password: str) -> User:
    session = db_connection.get_session()
    try:
        async with session:
            user = User(username=username, hashed_password=hash_password(password), is_active=True)
            await user_ops.save(session, user)
            await session.commit()
            return user
    except Exception:
        await session.rollback()
        raise


async def ensure_user(username: Optional[str], password: Optional[str]) -> bool:
    """
    Create ``username`` if it does not exist yet.

    Returns:
        True if a user was created
    """
    if not username or not password:
        return False

    async with db_connection.get_session() as session:
        existing = await user_ops.find_by_username(session, username)
    if existing is not None:
        return False

    await create_user(username, password)
    get_current_logger().info(f"Bootstrap user created: {username}")
    return True

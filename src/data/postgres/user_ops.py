from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.data.models.db_entity.user import User


async def find_by_username(session: AsyncSession, username: str) -> User | None:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def save(session: AsyncSession, user: User) -> User:
    session.add(user)
    await session.flush()
    return user

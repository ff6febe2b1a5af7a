from sqlalchemy import select, exists
from sqlalchemy.ext.asyncio import AsyncSession

from src.data.models.db_entity.category import Category


async def find_by_code(session: AsyncSession, code: str) -> Category | None:
    result = await session.execute(select(Category).filter(Category.code == code))
    return result.scalar_one_or_none()


async def exists_by_code(session: AsyncSession, code: str) -> bool:
    result = await session.execute(select(exists().where(Category.code == code)))
    return bool(result.scalar())


async def find_all(session: AsyncSession) -> list[Category]:
    result = await session.execute(select(Category).order_by(Category.code))
    return list(result.scalars().all())


async def find_child_codes(session: AsyncSession, parent_code: str) -> list[str]:
    result = await session.execute(
        select(Category.code).filter(Category.parent_code == parent_code).order_by(Category.code)
    )
    return list(result.scalars().all())


async def save(session: AsyncSession, category: Category) -> Category:
    session.add(category)
    await session.flush()
    return category

from sqlalchemy import select, delete, exists
from sqlalchemy.ext.asyncio import AsyncSession

from src.data.models.db_entity.catalog import Catalog
from src.data.models.db_entity.product import Product
from src.data.models.db_entity.review import Review


async def find_by_code(session: AsyncSession, code: str) -> Catalog | None:
    result = await session.execute(select(Catalog).filter(Catalog.code == code))
    return result.scalar_one_or_none()


async def exists_by_code(session: AsyncSession, code: str) -> bool:
    result = await session.execute(select(exists().where(Catalog.code == code)))
    return bool(result.scalar())


async def find_all(session: AsyncSession) -> list[Catalog]:
    result = await session.execute(select(Catalog).order_by(Catalog.code))
    return list(result.scalars().all())


async def save(session: AsyncSession, catalog: Catalog) -> Catalog:
    session.add(catalog)
    await session.flush()
    return catalog


async def delete_by_code(session: AsyncSession, code: str) -> int:
    """
    Delete a catalog together with the products it owns and their reviews.

    Returns:
        Number of catalog rows deleted
    """
    owned_products = select(Product.code).filter(Product.catalog_code == code)
    await session.execute(delete(Review).where(Review.product_code.in_(owned_products)))
    await session.execute(delete(Product).where(Product.catalog_code == code))
    result = await session.execute(delete(Catalog).where(Catalog.code == code))
    return result.rowcount

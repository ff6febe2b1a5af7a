from sqlalchemy import select, delete, exists
from sqlalchemy.ext.asyncio import AsyncSession

from src.data.models.db_entity.product import Product
from src.data.models.db_entity.review import Review
from src.data.postgres.pagination import Page, PageRequest, paginate
from src.utils.logger import get_current_logger

# Sort names accepted from clients. Wire names first, then column names.
SORTABLE_COLUMNS = {
    "code": Product.code,
    "name": Product.name,
    "description": Product.description,
    "isInStock": Product.is_in_stock,
    "stockKeepingUnit": Product.stock_keeping_unit,
    "categoryCode": Product.category_code,
    "catalogCode": Product.catalog_code,
    "price": Product.base_price_value,
    "basePrice": Product.base_price_value,
    "basePrice.value": Product.base_price_value,
    "basePrice.currency": Product.base_price_currency,
    "is_in_stock": Product.is_in_stock,
    "stock_keeping_unit": Product.stock_keeping_unit,
    "category_code": Product.category_code,
    "catalog_code": Product.catalog_code,
    "base_price_value": Product.base_price_value,
    "base_price_currency": Product.base_price_currency,
}


async def find_by_code(session: AsyncSession, code: str) -> Product | None:
    """
    Find a product by its code.

    Args:
        session: Open database session
        code: Product code to search for

    Returns:
        Product object if found, None otherwise
    """
    result = await session.execute(select(Product).filter(Product.code == code))
    return result.scalar_one_or_none()


async def exists_by_code(session: AsyncSession, code: str) -> bool:
    result = await session.execute(select(exists().where(Product.code == code)))
    return bool(result.scalar())


async def find_all(session: AsyncSession, page_request: PageRequest) -> Page[Product]:
    return await paginate(session, select(Product), page_request, SORTABLE_COLUMNS)


async def find_by_category_code(
    session: AsyncSession, category_code: str, page_request: PageRequest
) -> Page[Product]:
    query = select(Product).filter(Product.category_code == category_code)
    return await paginate(session, query, page_request, SORTABLE_COLUMNS)


async def find_by_in_stock(
    session: AsyncSession, is_in_stock: bool, page_request: PageRequest
) -> Page[Product]:
    query = select(Product).filter(Product.is_in_stock == is_in_stock)
    return await paginate(session, query, page_request, SORTABLE_COLUMNS)


async def find_by_category_code_and_in_stock(
    session: AsyncSession, category_code: str, is_in_stock: bool, page_request: PageRequest
) -> Page[Product]:
    query = select(Product).filter(
        Product.category_code == category_code,
        Product.is_in_stock == is_in_stock,
    )
    return await paginate(session, query, page_request, SORTABLE_COLUMNS)


async def save(session: AsyncSession, product: Product) -> Product:
    """Stage a new or modified product and flush it so constraint errors surface here."""
    session.add(product)
    await session.flush()
    return product


async def save_all(session: AsyncSession, products: list[Product]) -> list[Product]:
    session.add_all(products)
    await session.flush()
    return products


async def delete_by_code(session: AsyncSession, code: str) -> int:
    """
    Delete a product and its reviews.

    Returns:
        Number of product rows deleted
    """
    await session.execute(delete(Review).where(Review.product_code == code))
    result = await session.execute(delete(Product).where(Product.code == code))
    logger = get_current_logger()
    logger.debug(f"Deleted product rows for {code}: {result.rowcount}")
    return result.rowcount


async def find_codes_by_catalog_code(session: AsyncSession, catalog_code: str) -> list[str]:
    result = await session.execute(select(Product.code).filter(Product.catalog_code == catalog_code))
    return list(result.scalars().all())

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog_api import catalog_api_logger as logger
from src.catalog_api.mappers import product_mapper
from src.catalog_api.schemas.product_schemas import ProductPatch
from src.data.models.db_entity.product import Product
from src.data.models.domain_entity import ProductRecord
from src.data.postgres import catalog_ops, category_ops, product_ops
from src.data.postgres.connection import db_connection
from src.data.postgres.pagination import Page, PageRequest
from src.data.redis.cache_ops import get_cached_product, cache_product, evict_products
from src.utils.exceptions import AlreadyExistsError, NotFoundError, ValidationError


async def _resolve_category_code(session: AsyncSession, code: Optional[str]) -> Optional[str]:
    """Unknown codes resolve to no category rather than an error."""
    if code is None:
        return None
    category = await category_ops.find_by_code(session, code)
    if category is None:
        logger.warning(f"Category '{code}' not found, leaving product category unset")
        return None
    return category.code


async def _resolve_catalog_code(session: AsyncSession, code: Optional[str]) -> Optional[str]:
    if code is None:
        return None
    catalog = await catalog_ops.find_by_code(session, code)
    if catalog is None:
        logger.warning(f"Catalog '{code}' not found, leaving product catalog unset")
        return None
    return catalog.code


async def _set_relationships(
    session: AsyncSession,
    product: Product,
    record: ProductRecord,
) -> None:
    """Point ``product`` at the category and catalog named by ``record``.

    A relation is only touched when ``record`` names a code for it.
    """
    if record.category_code is not None:
        product.category_code = await _resolve_category_code(session, record.category_code)
    if record.catalog_code is not None:
        product.catalog_code = await _resolve_catalog_code(session, record.catalog_code)


async def _check_creatable(session: AsyncSession, record: ProductRecord) -> None:
    if not record.is_valid():
        raise ValidationError(f"Invalid product data for code: {record.code}")
    if await product_ops.exists_by_code(session, record.code):
        raise AlreadyExistsError("Product", "code", record.code)


async def create_product(record: ProductRecord) -> ProductRecord:
    logger.info(f"Creating product with code: {record.code}")

    if not record.is_valid():
        raise ValidationError("Invalid product data")

    session = db_connection.get_session()
    try:
        async with session:
            if await product_ops.exists_by_code(session, record.code):
                raise AlreadyExistsError("Product", "code", record.code)

            product = product_mapper.domain_to_entity(record)
            await _set_relationships(session, product, record)
            await product_ops.save(session, product)
            await session.commit()

            logger.info(f"Product created successfully with code: {product.code}")
            return product_mapper.entity_to_domain(product)
    except Exception:
        await session.rollback()
        raise


async def create_products(records: List[ProductRecord]) -> List[ProductRecord]:
    """
    Create several products in one transaction.

    Every record is validated and existence-checked before anything is
    written; any failure rolls the whole batch back.
    """
    logger.info(f"Creating {len(records)} products")

    session = db_connection.get_session()
    try:
        async with session:
            seen = set()
            for record in records:
                await _check_creatable(session, record)
                if record.code in seen:
                    raise AlreadyExistsError("Product", "code", record.code)
                seen.add(record.code)

            products = []
            for record in records:
                product = product_mapper.domain_to_entity(record)
                await _set_relationships(session, product, record)
                products.append(product)

            await product_ops.save_all(session, products)
            await session.commit()

            logger.info(f"Successfully created {len(products)} products")
            return [product_mapper.entity_to_domain(p) for p in products]
    except Exception:
        await session.rollback()
        raise


async def get_product_by_code(code: str) -> ProductRecord:
    logger.info(f"Fetching product with code: {code}")

    cached = await get_cached_product(code)
    if cached:
        logger.debug(f"Cache HIT: product {code}")
        return product_mapper.cached_dict_to_domain(cached)

    logger.debug(f"Cache MISS: product {code}")
    async with db_connection.get_session() as session:
        product = await product_ops.find_by_code(session, code)
        if product is None:
            raise NotFoundError("Product", "code", code)
        await cache_product(code, product.to_dict())
        return product_mapper.entity_to_domain(product)


async def get_all_products(page_request: PageRequest) -> Page[ProductRecord]:
    logger.info(f"Fetching all products - page: {page_request.page}, size: {page_request.size}")

    async with db_connection.get_session() as session:
        page = await product_ops.find_all(session, page_request)
        return page.map(product_mapper.entity_to_domain)


async def get_products_with_filters(
    category_code: Optional[str],
    in_stock: Optional[bool],
    page_request: PageRequest,
) -> Page[ProductRecord]:
    logger.info(
        f"Fetching products with filters - category: {category_code}, inStock: {in_stock}, "
        f"page: {page_request.page}, size: {page_request.size}"
    )

    async with db_connection.get_session() as session:
        if category_code is not None and in_stock is not None:
            page = await product_ops.find_by_category_code_and_in_stock(
                session, category_code, in_stock, page_request
            )
        elif category_code is not None:
            page = await product_ops.find_by_category_code(session, category_code, page_request)
        elif in_stock is not None:
            page = await product_ops.find_by_in_stock(session, in_stock, page_request)
        else:
            page = await product_ops.find_all(session, page_request)

        return page.map(product_mapper.entity_to_domain)


async def update_product(code: str, record: ProductRecord) -> ProductRecord:
    logger.info(f"Updating product with code: {code}")

    if not record.is_valid():
        raise ValidationError("Invalid product data")

    session = db_connection.get_session()
    try:
        async with session:
            product = await product_ops.find_by_code(session, code)
            if product is None:
                raise NotFoundError("Product", "code", code)

            product_mapper.apply_domain_to_entity(record, product)
            await _set_relationships(session, product, record)
            await product_ops.save(session, product)
            await session.commit()
    except Exception:
        await session.rollback()
        raise

    await evict_products([code])
    logger.info(f"Product updated successfully with code: {code}")
    return product_mapper.entity_to_domain(product)


async def patch_product(code: str, patch: ProductPatch) -> ProductRecord:
    logger.info(f"Partially updating product with code: {code}")

    session = db_connection.get_session()
    try:
        async with session:
            product = await product_ops.find_by_code(session, code)
            if product is None:
                raise NotFoundError("Product", "code", code)

            if patch.name is not None:
                product.name = patch.name
            if patch.description is not None:
                product.description = patch.description
            if patch.base_price is not None:
                product.base_price_value = patch.base_price.value
                product.base_price_currency = patch.base_price.currency
            if patch.is_in_stock is not None:
                product.is_in_stock = patch.is_in_stock
            if patch.stock_keeping_unit is not None:
                product.stock_keeping_unit = patch.stock_keeping_unit
            if patch.category_code is not None:
                product.category_code = await _resolve_category_code(session, patch.category_code)
            if patch.catalog_code is not None:
                product.catalog_code = await _resolve_catalog_code(session, patch.catalog_code)

            await product_ops.save(session, product)
            await session.commit()
    except Exception:
        await session.rollback()
        raise

    await evict_products([code])
    logger.info(f"Product patched successfully with code: {code}")
    return product_mapper.entity_to_domain(product)


async def delete_product(code: str) -> None:
    logger.info(f"Deleting product with code: {code}")

    session = db_connection.get_session()
    try:
        async with session:
            if not await product_ops.exists_by_code(session, code):
                raise NotFoundError("Product", "code", code)
            await product_ops.delete_by_code(session, code)
            await session.commit()
    except Exception:
        await session.rollback()
        raise

    await evict_products([code])
    logger.info(f"Product deleted successfully with code: {code}")


async def delete_products(codes: List[str]) -> None:
    """Delete several products; every code must exist or nothing is deleted."""
    logger.info(f"Deleting {len(codes)} products")

    session = db_connection.get_session()
    try:
        async with session:
            for code in codes:
                if not await product_ops.exists_by_code(session, code):
                    raise NotFoundError("Product", "code", code)
            for code in codes:
                await product_ops.delete_by_code(session, code)
            await session.commit()
    except Exception:
        await session.rollback()
        raise

    await evict_products(codes)
    logger.info(f"Successfully deleted {len(codes)} products")


async def exists_by_code(code: str) -> bool:
    async with db_connection.get_session() as session:
        return await product_ops.exists_by_code(session, code)

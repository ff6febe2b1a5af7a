from typing import List

from src.catalog_api import catalog_api_logger as logger
from src.catalog_api.schemas.catalog_schemas import CatalogCreate, CatalogResponse
from src.data.models.db_entity.catalog import Catalog
from src.data.postgres import catalog_ops, product_ops
from src.data.postgres.connection import db_connection
from src.data.redis.cache_ops import evict_products
from src.utils.exceptions import AlreadyExistsError, NotFoundError


def _to_response(catalog: Catalog) -> CatalogResponse:
    return CatalogResponse(
        code=catalog.code,
        name=catalog.name,
        catalog_version=catalog.catalog_version,
    )


async def create_catalog(data: CatalogCreate) -> CatalogResponse:
    logger.info(f"Creating catalog with code: {data.code}")

    session = db_connection.get_session()
    try:
        async with session:
            if await catalog_ops.exists_by_code(session, data.code):
                raise AlreadyExistsError("Catalog", "code", data.code)

            catalog = Catalog(code=data.code, name=data.name, catalog_version=data.catalog_version)
            await catalog_ops.save(session, catalog)
            await session.commit()
            return _to_response(catalog)
    except Exception:
        await session.rollback()
        raise


async def get_catalog(code: str) -> CatalogResponse:
    async with db_connection.get_session() as session:
        catalog = await catalog_ops.find_by_code(session, code)
        if catalog is None:
            raise NotFoundError("Catalog", "code", code)
        return _to_response(catalog)


async def get_all_catalogs() -> List[CatalogResponse]:
    async with db_connection.get_session() as session:
        return [_to_response(c) for c in await catalog_ops.find_all(session)]


async def delete_catalog(code: str) -> None:
    """Delete a catalog and every product it owns."""
    logger.info(f"Deleting catalog with code: {code}")

    session = db_connection.get_session()
    try:
        async with session:
            if not await catalog_ops.exists_by_code(session, code):
                raise NotFoundError("Catalog", "code", code)
            product_codes = await product_ops.find_codes_by_catalog_code(session, code)
            await catalog_ops.delete_by_code(session, code)
            await session.commit()
    except Exception:
        await session.rollback()
        raise

    await evict_products(product_codes)
    logger.info(f"Catalog {code} deleted with {len(product_codes)} products")

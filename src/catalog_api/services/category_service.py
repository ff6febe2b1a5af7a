from typing import List

from src.catalog_api import catalog_api_logger as logger
from src.catalog_api.schemas.category_schemas import CategoryCreate, CategoryResponse
from src.data.models.db_entity.category import Category
from src.data.postgres import category_ops
from src.data.postgres.connection import db_connection
from src.utils.exceptions import AlreadyExistsError, NotFoundError


def _to_response(category: Category, child_codes: List[str]) -> CategoryResponse:
    return CategoryResponse(
        code=category.code,
        name=category.name,
        description=category.description,
        parent_code=category.parent_code,
        child_codes=child_codes,
    )


async def create_category(data: CategoryCreate) -> CategoryResponse:
    """
    Create a category, optionally below an existing parent.

    An unknown parent code leaves the category at the top level. Cycles
    cannot arise on creation since a new category has no children yet.
    """
    logger.info(f"Creating category with code: {data.code}")

    session = db_connection.get_session()
    try:
        async with session:
            if await category_ops.exists_by_code(session, data.code):
                raise AlreadyExistsError("Category", "code", data.code)

            parent_code = None
            if data.parent_code is not None:
                parent = await category_ops.find_by_code(session, data.parent_code)
                if parent is None:
                    logger.warning(f"Parent category '{data.parent_code}' not found, creating '{data.code}' at top level")
                else:
                    parent_code = parent.code

            category = Category(
                code=data.code,
                name=data.name,
                description=data.description,
                parent_code=parent_code,
            )
            await category_ops.save(session, category)
            await session.commit()
            return _to_response(category, [])
    except Exception:
        await session.rollback()
        raise


async def get_category(code: str) -> CategoryResponse:
    async with db_connection.get_session() as session:
        category = await category_ops.find_by_code(session, code)
        if category is None:
            raise NotFoundError("Category", "code", code)
        child_codes = await category_ops.find_child_codes(session, code)
        return _to_response(category, child_codes)


async def get_all_categories() -> List[CategoryResponse]:
    async with db_connection.get_session() as session:
        categories = await category_ops.find_all(session)
        children: dict[str, List[str]] = {}
        for category in categories:
            if category.parent_code is not None:
                children.setdefault(category.parent_code, []).append(category.code)
        return [_to_response(c, children.get(c.code, [])) for c in categories]

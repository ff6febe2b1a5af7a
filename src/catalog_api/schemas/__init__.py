from src.catalog_api.schemas.product_schemas import (
    PriceSchema,
    ProductCreate,
    ProductUpdate,
    ProductPatch,
    ProductResponse,
    ProductPageResponse,
)
from src.catalog_api.schemas.category_schemas import CategoryCreate, CategoryResponse
from src.catalog_api.schemas.catalog_schemas import CatalogCreate, CatalogResponse

__all__ = [
    "PriceSchema",
    "ProductCreate",
    "ProductUpdate",
    "ProductPatch",
    "ProductResponse",
    "ProductPageResponse",
    "CategoryCreate",
    "CategoryResponse",
    "CatalogCreate",
    "CatalogResponse",
]

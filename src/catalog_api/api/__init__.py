from src.catalog_api.api.product_router import router as product_router
from src.catalog_api.api.category_router import router as category_router
from src.catalog_api.api.catalog_router import router as catalog_router

__all__ = ["product_router", "category_router", "catalog_router"]

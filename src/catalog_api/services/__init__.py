from src.catalog_api.services.product_service import (
    create_product,
    create_products,
    get_product_by_code,
    get_all_products,
    get_products_with_filters,
    update_product,
    patch_product,
    delete_product,
    delete_products,
    exists_by_code,
)
from src.catalog_api.services.category_service import (
    create_category,
    get_category,
    get_all_categories,
)
from src.catalog_api.services.catalog_service import (
    create_catalog,
    get_catalog,
    get_all_catalogs,
    delete_catalog,
)

__all__ = [
    "create_product",
    "create_products",
    "get_product_by_code",
    "get_all_products",
    "get_products_with_filters",
    "update_product",
    "patch_product",
    "delete_product",
    "delete_products",
    "exists_by_code",
    "create_category",
    "get_category",
    "get_all_categories",
    "create_catalog",
    "get_catalog",
    "get_all_catalogs",
    "delete_catalog",
]

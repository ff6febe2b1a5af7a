from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status

from src.auth.dependencies import get_current_user
from src.auth.schemas import UserInfo
from src.catalog_api import catalog_api_logger as logger
from src.catalog_api.mappers import product_mapper
from src.catalog_api.schemas.product_schemas import (
    ProductCreate,
    ProductUpdate,
    ProductPatch,
    ProductResponse,
    ProductPageResponse,
)
from src.catalog_api.services import product_service
from src.data.postgres.pagination import PageRequest

router = APIRouter(prefix="/api/v1/products", tags=["Products"])


@router.get("", response_model=ProductPageResponse)
async def list_products_endpoint(
    page: int = Query(default=0, description="Page number (0-indexed)"),
    size: int = Query(default=20, description="Number of items per page"),
    sort: str = Query(default="code,asc", description="Sort field and direction (e.g., name,asc)"),
    category_code: Optional[str] = Query(default=None, alias="categoryCode"),
    in_stock: Optional[bool] = Query(default=None, alias="inStock"),
    current_user: UserInfo = Depends(get_current_user),
):
    """List products page by page, optionally filtered by category and stock."""
    logger.info(
        f"GET /api/v1/products - page: {page}, size: {size}, categoryCode: {category_code}, "
        f"inStock: {in_stock}, user: {current_user.username}"
    )
    page_request = PageRequest.of(page, size, sort)
    result = await product_service.get_products_with_filters(category_code, in_stock, page_request)
    return product_mapper.page_to_response(result)


@router.get("/{code}", response_model=ProductResponse)
async def get_product_endpoint(code: str, current_user: UserInfo = Depends(get_current_user)):
    """Get a product by code."""
    logger.info(f"GET /api/v1/products/{code}")
    record = await product_service.get_product_by_code(code)
    return product_mapper.domain_to_response(record)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product_endpoint(data: ProductCreate, current_user: UserInfo = Depends(get_current_user)):
    """Create a new product."""
    logger.info(f"POST /api/v1/products - code: {data.code}")
    record = await product_service.create_product(product_mapper.create_request_to_domain(data))
    return product_mapper.domain_to_response(record)


@router.post("/batch", response_model=List[ProductResponse], status_code=status.HTTP_201_CREATED)
async def create_products_endpoint(
    data: List[ProductCreate],
    current_user: UserInfo = Depends(get_current_user),
):
    """Create multiple products. Nothing is created if any item is rejected."""
    logger.info(f"POST /api/v1/products/batch - count: {len(data)}")
    records = await product_service.create_products(
        [product_mapper.create_request_to_domain(item) for item in data]
    )
    return product_mapper.domains_to_responses(records)


@router.put("/{code}", response_model=ProductResponse)
async def update_product_endpoint(
    code: str,
    data: ProductUpdate,
    current_user: UserInfo = Depends(get_current_user),
):
    """Replace every mutable field of a product."""
    logger.info(f"PUT /api/v1/products/{code}")
    record = await product_service.update_product(code, product_mapper.update_request_to_domain(code, data))
    return product_mapper.domain_to_response(record)


@router.patch("/{code}", response_model=ProductResponse)
async def patch_product_endpoint(
    code: str,
    data: ProductPatch,
    current_user: UserInfo = Depends(get_current_user),
):
    """Update only the fields present in the payload."""
    logger.info(f"PATCH /api/v1/products/{code}")
    record = await product_service.patch_product(code, data)
    return product_mapper.domain_to_response(record)


# Registered before "/{code}" so that "batch" is not taken for a product code
@router.delete("/batch", status_code=status.HTTP_204_NO_CONTENT)
async def delete_products_endpoint(
    codes: List[str] = Body(...),
    current_user: UserInfo = Depends(get_current_user),
):
    """Delete multiple products by code."""
    logger.info(f"DELETE /api/v1/products/batch - count: {len(codes)}")
    await product_service.delete_products(codes)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product_endpoint(code: str, current_user: UserInfo = Depends(get_current_user)):
    """Delete a product by code."""
    logger.info(f"DELETE /api/v1/products/{code}")
    await product_service.delete_product(code)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

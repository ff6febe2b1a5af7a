from typing import List

from fastapi import APIRouter, Depends, status

from src.auth.dependencies import get_current_user
from src.auth.schemas import UserInfo
from src.catalog_api.schemas.category_schemas import CategoryCreate, CategoryResponse
from src.catalog_api.services import category_service

router = APIRouter(prefix="/api/v1/categories", tags=["Categories"])


@router.get("", response_model=List[CategoryResponse])
async def list_categories_endpoint(current_user: UserInfo = Depends(get_current_user)):
    return await category_service.get_all_categories()


@router.get("/{code}", response_model=CategoryResponse)
async def get_category_endpoint(code: str, current_user: UserInfo = Depends(get_current_user)):
    return await category_service.get_category(code)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category_endpoint(data: CategoryCreate, current_user: UserInfo = Depends(get_current_user)):
    """Create a category. An unknown parent code leaves it at the top level."""
    return await category_service.create_category(data)

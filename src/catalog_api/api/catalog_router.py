from typing import List

from fastapi import APIRouter, Depends, Response, status

from src.auth.dependencies import get_current_user
from src.auth.schemas import UserInfo
from src.catalog_api.schemas.catalog_schemas import CatalogCreate, CatalogResponse
from src.catalog_api.services import catalog_service

router = APIRouter(prefix="/api/v1/catalogs", tags=["Catalogs"])


@router.get("", response_model=List[CatalogResponse])
async def list_catalogs_endpoint(current_user: UserInfo = Depends(get_current_user)):
    return await catalog_service.get_all_catalogs()


@router.get("/{code}", response_model=CatalogResponse)
async def get_catalog_endpoint(code: str, current_user: UserInfo = Depends(get_current_user)):
    return await catalog_service.get_catalog(code)


@router.post("", response_model=CatalogResponse, status_code=status.HTTP_201_CREATED)
async def create_catalog_endpoint(data: CatalogCreate, current_user: UserInfo = Depends(get_current_user)):
    return await catalog_service.create_catalog(data)


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_catalog_endpoint(code: str, current_user: UserInfo = Depends(get_current_user)):
    """Delete a catalog together with all of its products."""
    await catalog_service.delete_catalog(code)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

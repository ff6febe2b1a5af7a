from pydantic import Field

from src.catalog_api.schemas.base import CamelModel
from src.data.models.enum.catalog_version import CatalogVersion


class CatalogCreate(CamelModel):
    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    catalog_version: CatalogVersion = CatalogVersion.STAGED


class CatalogResponse(CamelModel):
    code: str
    name: str
    catalog_version: CatalogVersion

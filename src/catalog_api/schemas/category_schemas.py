from typing import Optional, List

from pydantic import Field

from src.catalog_api.schemas.base import CamelModel


class CategoryCreate(CamelModel):
    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    parent_code: Optional[str] = Field(default=None, description="Code of the parent category")


class CategoryResponse(CamelModel):
    code: str
    name: str
    description: Optional[str] = None
    parent_code: Optional[str] = None
    child_codes: List[str] = Field(default_factory=list)

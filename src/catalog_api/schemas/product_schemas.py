from decimal import Decimal
from typing import Optional, List

from pydantic import Field, field_serializer

from src.catalog_api.schemas.base import CamelModel


class PriceSchema(CamelModel):
    value: Decimal = Field(..., ge=0, max_digits=19, decimal_places=2,
                          description="Price amount, non-negative, at most two decimals")
    currency: str = Field(..., min_length=3, max_length=3, pattern=r"^[A-Z]{3}$",
                          description="ISO 4217 currency code")

    @field_serializer("value")
    def serialize_value(self, value: Decimal) -> float:
        return float(value)


class ProductCreate(CamelModel):
    code: str = Field(..., min_length=1, max_length=50, description="Product code (unique identifier)")
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    description: Optional[str] = Field(default=None, max_length=1000)
    base_price: PriceSchema
    is_in_stock: bool = Field(default=True, description="Stock availability")
    stock_keeping_unit: Optional[str] = Field(default=None, max_length=100)
    category_code: Optional[str] = None
    catalog_code: Optional[str] = None


class ProductUpdate(CamelModel):
    """Full replacement of every mutable product field."""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    base_price: PriceSchema
    is_in_stock: bool = True
    stock_keeping_unit: Optional[str] = Field(default=None, max_length=100)
    category_code: Optional[str] = None
    catalog_code: Optional[str] = None


class ProductPatch(CamelModel):
    """Partial update. Fields left out (or null) keep their current value."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    base_price: Optional[PriceSchema] = None
    is_in_stock: Optional[bool] = None
    stock_keeping_unit: Optional[str] = Field(default=None, max_length=100)
    category_code: Optional[str] = None
    catalog_code: Optional[str] = None


class ProductResponse(CamelModel):
    code: str
    name: str
    description: Optional[str] = None
    base_price: Optional[PriceSchema] = None
    is_in_stock: bool
    stock_keeping_unit: Optional[str] = None
    category_code: Optional[str] = None
    catalog_code: Optional[str] = None


class ProductPageResponse(CamelModel):
    content: List[ProductResponse]
    page: int
    size: int
    total_elements: int
    total_pages: int
    last: bool

from dataclasses import dataclass
from typing import Optional

from src.data.models.domain_entity.price import Price


@dataclass
class ProductRecord:
    """A catalog item as the service layer sees it.

    Related category and catalog are referenced by code only.
    """

    code: Optional[str]
    name: Optional[str]
    description: Optional[str] = None
    base_price: Optional[Price] = None
    is_in_stock: Optional[bool] = True
    stock_keeping_unit: Optional[str] = None
    category_code: Optional[str] = None
    catalog_code: Optional[str] = None

    def is_valid(self) -> bool:
        return (
            bool(self.code and self.code.strip())
            and bool(self.name and self.name.strip())
            and self.base_price is not None
            and self.base_price.is_valid()
        )

    def is_available_for_purchase(self) -> bool:
        return (
            self.is_in_stock is True
            and self.base_price is not None
            and self.base_price.is_valid()
        )

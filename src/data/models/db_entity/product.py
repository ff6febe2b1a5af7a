from sqlalchemy import Column, String, Boolean, Numeric, ForeignKey, DateTime
from sqlalchemy.sql import func

from src.data.models import Base


class Product(Base):
    __tablename__ = 'product'

    code = Column(String(50), primary_key=True, index=True, nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(String(1000), nullable=True)
    base_price_value = Column(Numeric(19, 2), nullable=True)
    base_price_currency = Column(String(3), nullable=True)
    is_in_stock = Column(Boolean, nullable=False, default=True, index=True)
    stock_keeping_unit = Column(String(100), nullable=True)
    category_code = Column(String(50), ForeignKey('category.code', ondelete="SET NULL"), nullable=True, index=True)
    catalog_code = Column(String(50), ForeignKey('catalog.code', ondelete="CASCADE"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def to_dict(self):
        return {
            "code": self.code,
            "name": self.name,
            "description": self.description,
            "base_price_value": str(self.base_price_value) if self.base_price_value is not None else None,
            "base_price_currency": self.base_price_currency,
            "is_in_stock": self.is_in_stock,
            "stock_keeping_unit": self.stock_keeping_unit,
            "category_code": self.category_code,
            "catalog_code": self.catalog_code,
        }

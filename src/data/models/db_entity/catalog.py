from sqlalchemy import Column, String, Enum

from src.data.models import Base
from src.data.models.enum.catalog_version import CatalogVersion


class Catalog(Base):
    __tablename__ = "catalog"

    code = Column(String(50), primary_key=True, nullable=False)
    name = Column(String(255), nullable=False)
    catalog_version = Column(Enum(CatalogVersion, name="catalog_version_enum"), nullable=False)

    def to_dict(self):
        return {
            "code": self.code,
            "name": self.name,
            "catalog_version": self.catalog_version.value if self.catalog_version else None,
        }

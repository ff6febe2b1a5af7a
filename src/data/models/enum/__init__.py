from src.data.models.enum.catalog_version import CatalogVersion

__all__ = ["CatalogVersion"]

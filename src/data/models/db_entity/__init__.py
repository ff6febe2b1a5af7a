from src.data.models.db_entity.user import User
from src.data.models.db_entity.category import Category
from src.data.models.db_entity.catalog import Catalog
from src.data.models.db_entity.product import Product
from src.data.models.db_entity.review import Review

__all__ = ["User", "Category", "Catalog", "Product", "Review"]

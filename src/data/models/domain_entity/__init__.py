from src.data.models.domain_entity.price import Price
from src.data.models.domain_entity.product import ProductRecord

__all__ = ["Price", "ProductRecord"]

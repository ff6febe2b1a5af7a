import uuid

from sqlalchemy import Column, String, Integer, ForeignKey

from src.data.models import Base


class Review(Base):
    __tablename__ = "review"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    comment = Column(String(2000), nullable=True)
    rating = Column(Integer, nullable=True)
    product_code = Column(String(50), ForeignKey("product.code", ondelete="CASCADE"), nullable=False, index=True)

    def to_dict(self):
        return {
            "id": self.id,
            "comment": self.comment,
            "rating": self.rating,
            "product_code": self.product_code,
        }

from sqlalchemy import Column, String, ForeignKey

from src.data.models import Base


class Category(Base):
    __tablename__ = "category"

    code = Column(String(50), primary_key=True, nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(String(1000), nullable=True)
    # The child owns the link; children are found by querying parent_code
    parent_code = Column(String(50), ForeignKey("category.code", ondelete="SET NULL"), nullable=True, index=True)

    def to_dict(self):
        return {
            "code": self.code,
            "name": self.name,
            "description": self.description,
            "parent_code": self.parent_code,
        }

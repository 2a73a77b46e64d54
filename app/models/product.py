"""ORM model for catalog products."""

from sqlalchemy import Column, Float, Integer, String, Text

from app.models.base import Base


class Product(Base):
    """Catalog entry. Every descriptive field is optional."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    prod_name = Column(String(50), nullable=True, index=True)
    prod_price = Column(Float, nullable=True)
    prod_desc = Column(Text, nullable=True)

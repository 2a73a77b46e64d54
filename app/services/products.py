"""Product catalog operations over a SQLAlchemy session."""

import logging

from sqlalchemy.orm import Session

from app.models.product import Product
from app.schemas.product import ProductIn

logger = logging.getLogger(__name__)


class ProductNotFoundError(Exception):
    """Raised when updating or deleting a product id that does not exist."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        self.message = "Product not found."
        super().__init__(self.message)


def list_products(session: Session) -> list[Product]:
    return session.query(Product).order_by(Product.id).all()


def get_product(session: Session, product_id: int) -> Product | None:
    return session.get(Product, product_id)


def search_products(session: Session, name: str) -> list[Product]:
    """Products whose name contains the given substring."""
    return (
        session.query(Product)
        .filter(Product.prod_name.contains(name, autoescape=True))
        .order_by(Product.id)
        .all()
    )


def create_product(session: Session, data: ProductIn) -> Product:
    product = Product(
        prod_name=data.prod_name,
        prod_price=data.prod_price,
        prod_desc=data.prod_desc,
    )
    session.add(product)
    session.commit()
    session.refresh(product)
    logger.info("Product added", extra={"product_id": product.id})
    return product


def update_product(session: Session, product_id: int, data: ProductIn) -> Product:
    """Overwrite name, price and description. Raises ProductNotFoundError."""
    product = session.get(Product, product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    product.prod_name = data.prod_name
    product.prod_price = data.prod_price
    product.prod_desc = data.prod_desc
    session.commit()
    session.refresh(product)
    logger.info("Product updated", extra={"product_id": product_id})
    return product


def delete_product(session: Session, product_id: int) -> None:
    product = session.get(Product, product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    session.delete(product)
    session.commit()
    logger.info("Product deleted", extra={"product_id": product_id})

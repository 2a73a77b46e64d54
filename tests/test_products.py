"""Tests for app.services.products against an in-memory database."""

import unittest

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import Base, Product
from app.schemas.product import ProductIn
from app.services.products import (
    ProductNotFoundError,
    create_product,
    delete_product,
    get_product,
    list_products,
    search_products,
    update_product,
)


def _memory_session() -> Session:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)()


class TestProductCatalog(unittest.TestCase):
    def setUp(self) -> None:
        self.db = _memory_session()
        self.keyboard = create_product(
            self.db, ProductIn(prod_name="Keyboard", prod_price=49.5, prod_desc="Mechanical")
        )
        self.mouse = create_product(self.db, ProductIn(prod_name="Mouse", prod_price=19.0))

    def tearDown(self) -> None:
        self.db.close()

    def test_list_in_id_order(self) -> None:
        names = [p.prod_name for p in list_products(self.db)]
        self.assertEqual(names, ["Keyboard", "Mouse"])

    def test_get_by_id(self) -> None:
        product = get_product(self.db, self.keyboard.id)
        self.assertEqual(product.prod_desc, "Mechanical")
        self.assertIsNone(get_product(self.db, 9999))

    def test_search_by_substring(self) -> None:
        self.assertEqual([p.id for p in search_products(self.db, "ous")], [self.mouse.id])
        self.assertEqual(search_products(self.db, "Monitor"), [])

    def test_search_treats_wildcards_literally(self) -> None:
        self.assertEqual(search_products(self.db, "%"), [])

    def test_update_overwrites_fields(self) -> None:
        updated = update_product(
            self.db, self.mouse.id, ProductIn(prod_name="Wireless Mouse", prod_price=25.0)
        )
        self.assertEqual(updated.prod_name, "Wireless Mouse")
        self.assertEqual(updated.prod_price, 25.0)
        self.assertIsNone(updated.prod_desc)

    def test_update_missing(self) -> None:
        with self.assertRaises(ProductNotFoundError) as ctx:
            update_product(self.db, 9999, ProductIn(prod_name="Ghost"))
        self.assertEqual(ctx.exception.product_id, 9999)

    def test_delete(self) -> None:
        delete_product(self.db, self.keyboard.id)
        self.assertEqual([p.id for p in list_products(self.db)], [self.mouse.id])
        self.assertEqual(self.db.query(Product).count(), 1)

    def test_delete_missing(self) -> None:
        with self.assertRaises(ProductNotFoundError):
            delete_product(self.db, 9999)


if __name__ == "__main__":
    unittest.main()

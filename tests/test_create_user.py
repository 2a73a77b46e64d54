"""Tests for the create_user CLI with SessionLocal pointed at in-memory SQLite."""

import unittest
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import Base, User
from app.scripts import create_user


class TestCreateUserCli(unittest.TestCase):
    def setUp(self) -> None:
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(engine)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        for target, value in (
            ("app.scripts.create_user.SessionLocal", self.session_factory),
            ("app.core.security.BCRYPT_ROUNDS", 4),
        ):
            p = patch(target, value)
            p.start()
            self.addCleanup(p.stop)

    def test_creates_admin(self) -> None:
        code = create_user.main(["root", "root@x.com", "Secret123!", "admin"])
        self.assertEqual(code, 0)
        db = self.session_factory()
        try:
            user = db.query(User).filter(User.username == "root").one()
            self.assertEqual(user.role, "admin")
            self.assertEqual(user.email, "root@x.com")
        finally:
            db.close()

    def test_duplicate_username(self) -> None:
        self.assertEqual(create_user.main(["root", "root@x.com", "Secret123!"]), 0)
        self.assertEqual(create_user.main(["root", "other@x.com", "Secret123!"]), 1)

    def test_blank_username(self) -> None:
        self.assertEqual(create_user.main(["  ", "root@x.com", "Secret123!"]), 1)


if __name__ == "__main__":
    unittest.main()

"""ORM model for application users (registration, login and token claims)."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class User(Base):
    """
    User account for JWT authentication.

    username is the registration collision key (unique index). email is the
    login lookup key and is deliberately not unique.
    role: embedded verbatim in issued tokens ('user' by default, or 'admin').
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user")

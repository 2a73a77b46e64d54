"""Declarative base shared by the users and products tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass

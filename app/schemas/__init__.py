"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
)
from app.schemas.health import HealthResponse
from app.schemas.product import ProductIn, ProductOut, ProductUpdate

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "ProductIn",
    "ProductOut",
    "ProductUpdate",
    "RegisterRequest",
    "TokenResponse",
]

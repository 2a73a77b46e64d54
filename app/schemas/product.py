"""Request/response schemas for the product catalog."""

from pydantic import BaseModel, ConfigDict, Field


class ProductIn(BaseModel):
    """Fields accepted when adding a product."""

    prod_name: str | None = Field(default=None, max_length=50)
    prod_price: float | None = Field(default=None, ge=0)
    prod_desc: str | None = None


class ProductUpdate(ProductIn):
    """Full replacement of an existing product, addressed by id."""

    id: int


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    prod_name: str | None = None
    prod_price: float | None = None
    prod_desc: str | None = None

"""Product catalog endpoints. Reads are public; writes need a bearer token."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user, require_admin
from app.core.database import get_db
from app.schemas.auth import CurrentUser, MessageResponse
from app.schemas.product import ProductIn, ProductOut, ProductUpdate
from app.services.products import (
    ProductNotFoundError,
    create_product,
    delete_product,
    get_product,
    list_products,
    search_products,
    update_product,
)

router = APIRouter()


@router.get("", response_model=list[ProductOut])
def get_products(db: Annotated[Session, Depends(get_db)]) -> list[ProductOut]:
    return [ProductOut.model_validate(p) for p in list_products(db)]


# Declared before "/{prod_name}" so "fetch" is not treated as a name filter.
@router.get("/fetch/{prod_id}", response_model=ProductOut)
def get_product_by_id(
    prod_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> ProductOut:
    product = get_product(db, prod_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found.")
    return ProductOut.model_validate(product)


@router.get("/{prod_name}", response_model=list[ProductOut])
def filter_products(
    prod_name: str,
    db: Annotated[Session, Depends(get_db)],
) -> list[ProductOut]:
    """Products whose name contains prod_name."""
    return [ProductOut.model_validate(p) for p in search_products(db, prod_name)]


@router.post("", response_model=MessageResponse)
def add_product(
    body: ProductIn,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    create_product(db, body)
    return MessageResponse(message="Product Added Successfully!")


@router.put("", response_model=MessageResponse)
def edit_product(
    body: ProductUpdate,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    try:
        update_product(db, body.id, body)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return MessageResponse(message="Product Updated Successfully!")


@router.delete("/{prod_id}", response_model=MessageResponse)
def remove_product(
    prod_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    """Delete a product (admin only)."""
    try:
        delete_product(db, prod_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return MessageResponse(message="Product Deleted Successfully!")

# grossapp_api/routers/products.py

from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from grossapp_api.db.session import get_db
from grossapp_api.schemas.common import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from grossapp_api.schemas.products import ProductCreate, ProductRead, ProductUpdate
from grossapp_api.services.products_service import ProductsService

router = APIRouter(prefix="/products", tags=["products"])


def get_products_service(session: Session = Depends(get_db)) -> ProductsService:
    return ProductsService(session)


@router.get("", response_model=List[ProductRead], summary="List products")
def list_products(
    *,
    service: ProductsService = Depends(get_products_service),
) -> List[ProductRead]:
    return service.list_products()


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    description="Create a product owned by an existing admin.",
    responses={**VALIDATION_RESPONSE},
)
def create_product(
    *,
    payload: ProductCreate,
    service: ProductsService = Depends(get_products_service),
) -> ProductRead:
    return service.create_product(payload)


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    summary="Get a single product",
    responses={**NOT_FOUND_RESPONSE},
)
def get_product(
    *,
    product_id: UUID,
    service: ProductsService = Depends(get_products_service),
) -> ProductRead:
    return service.get_product(product_id)


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    summary="Update a product",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def update_product(
    *,
    product_id: UUID,
    payload: ProductUpdate,
    service: ProductsService = Depends(get_products_service),
) -> ProductRead:
    return service.update_product(product_id, payload)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    responses={**NOT_FOUND_RESPONSE},
)
def delete_product(
    *,
    product_id: UUID,
    service: ProductsService = Depends(get_products_service),
) -> None:
    service.delete_product(product_id)

"""Catalog endpoints: public listing and admin mutations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from storefront.api.deps import get_container, require_admin
from storefront.api.schemas import (
    MessageResponse,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from storefront.domain.auth import SessionClaims

router = APIRouter(prefix="/api/products", tags=["products"])

AdminClaims = Annotated[SessionClaims, Depends(require_admin)]


@router.get("")
async def list_products(request: Request) -> list[ProductResponse]:
    """Return every product, newest first."""
    container = get_container(request)
    products = container.catalog_service.list_products()
    return [ProductResponse.from_domain(product) for product in products]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: ProductCreateRequest, request: Request, claims: AdminClaims
) -> ProductResponse:
    """Create a product."""
    container = get_container(request)
    product = container.catalog_service.create_product(
        claims,
        name=payload.name,
        price=payload.price,
        rating=payload.rating,
        image=payload.image,
    )
    return ProductResponse.from_domain(product)


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    payload: ProductUpdateRequest,
    request: Request,
    claims: AdminClaims,
) -> ProductResponse:
    """Apply a partial update to a product."""
    container = get_container(request)
    product = container.catalog_service.update_product(
        claims, product_id, payload.model_dump(exclude_unset=True)
    )
    return ProductResponse.from_domain(product)


@router.delete("/{product_id}")
async def delete_product(
    product_id: str, request: Request, claims: AdminClaims
) -> MessageResponse:
    """Delete a product."""
    container = get_container(request)
    container.catalog_service.delete_product(claims, product_id)
    return MessageResponse(message="Deleted")

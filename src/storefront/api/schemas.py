"""Pydantic models for the catalog HTTP API."""

from datetime import datetime

from pydantic import BaseModel

from storefront.domain.products import Product


class LoginRequest(BaseModel):
    """Admin login payload."""

    password: str | None = None


class TokenResponse(BaseModel):
    """Issued session token."""

    token: str


class ProductCreateRequest(BaseModel):
    """Payload for creating a product."""

    name: str | None = None
    price: str | None = None
    rating: int | float | str | None = None
    image: str | None = None


class ProductUpdateRequest(BaseModel):
    """Partial payload for updating a product."""

    name: str | None = None
    price: str | None = None
    rating: int | float | str | None = None
    image: str | None = None


class ProductResponse(BaseModel):
    """Product as returned to API callers."""

    id: str
    name: str
    price: str
    rating: int
    image: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        """Build a response model from a domain product."""
        return cls(
            id=str(product.id),
            name=product.name,
            price=product.price,
            rating=product.rating,
            image=product.image,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class UploadResponse(BaseModel):
    """Location of a stored upload."""

    url: str

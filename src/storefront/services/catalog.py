"""Catalog service: product reads, admin mutations and startup seeding."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from storefront.domain.auth import SessionClaims
from storefront.domain.errors import NotFound, ValidationError
from storefront.domain.products import (
    DEFAULT_PRODUCTS,
    DEFAULT_RATING,
    MAX_RATING,
    MIN_RATING,
    Product,
)
from storefront.services.auth import require_role

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "price", "rating", "image")


class ProductRepository(Protocol):
    """Persistence interface for catalog products."""

    def list_products(self) -> list[Product]:
        """Return all products, most recently created first."""

    def count_products(self) -> int:
        """Return the number of stored products."""

    def get_product(self, product_id: UUID) -> Product | None:
        """Return a product by id, if present."""

    def create_product(self, payload: dict[str, object]) -> Product:
        """Insert a product and return it."""

    def create_products(self, payloads: list[dict[str, object]]) -> list[Product]:
        """Insert several products and return them."""

    def update_product(
        self, product_id: UUID, payload: dict[str, object]
    ) -> Product | None:
        """Apply the payload to a product; None when no product matched."""

    def delete_product(self, product_id: UUID) -> bool:
        """Remove a product; False when no product matched."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class CatalogService:
    """Application service for the product catalog."""

    repository: ProductRepository
    clock: Callable[[], datetime] = field(default=_utcnow)

    def list_products(self) -> list[Product]:
        """Return the public catalog."""
        return self.repository.list_products()

    def create_product(  # noqa: PLR0913
        self,
        claims: SessionClaims,
        name: str | None,
        price: str | None,
        rating: object = None,
        image: str | None = None,
    ) -> Product:
        """Validate and insert a new product."""
        require_role(claims)
        now = self.clock().isoformat()
        payload: dict[str, object] = {
            "name": _required_text(name, "name"),
            "price": _required_text(price, "price"),
            "rating": DEFAULT_RATING if rating is None else normalize_rating(rating),
            "image": _optional_text(image),
            "created_at": now,
            "updated_at": now,
        }
        product = self.repository.create_product(payload)
        logger.info("Created product", extra={"product_id": str(product.id)})
        return product

    def update_product(
        self,
        claims: SessionClaims,
        product_id: str | UUID,
        fields: Mapping[str, object],
    ) -> Product:
        """Apply the provided fields to an existing product."""
        require_role(claims)
        resolved_id = _parse_product_id(product_id)
        if self.repository.get_product(resolved_id) is None:
            raise NotFound()
        payload: dict[str, object] = {}
        for key in UPDATABLE_FIELDS:
            value = fields.get(key)
            if value is None:
                continue
            if key in {"name", "price"}:
                payload[key] = _required_text(value, key)
            elif key == "rating":
                payload[key] = normalize_rating(value)
            else:
                payload[key] = _optional_text(value)
        payload["updated_at"] = self.clock().isoformat()
        product = self.repository.update_product(resolved_id, payload)
        if product is None:
            raise NotFound()
        logger.info("Updated product", extra={"product_id": str(product.id)})
        return product

    def delete_product(self, claims: SessionClaims, product_id: str | UUID) -> None:
        """Remove a product permanently."""
        require_role(claims)
        resolved_id = _parse_product_id(product_id)
        if not self.repository.delete_product(resolved_id):
            raise NotFound()
        logger.info("Deleted product", extra={"product_id": str(resolved_id)})

    def seed_defaults(self) -> int:
        """Insert the default products when the store is empty."""
        if self.repository.count_products() > 0:
            return 0
        now = self.clock().isoformat()
        created = self.repository.create_products(
            [
                {
                    "name": seed.name,
                    "price": seed.price,
                    "rating": seed.rating,
                    "image": seed.image,
                    "created_at": now,
                    "updated_at": now,
                }
                for seed in DEFAULT_PRODUCTS
            ]
        )
        logger.info("Seeded default products", extra={"count": len(created)})
        return len(created)


def normalize_rating(value: object) -> int:
    """Coerce a rating to an integer clamped into the allowed range."""
    if isinstance(value, bool):
        raise ValidationError("rating must be a number")
    try:
        rating = int(float(str(value).strip()))
    except (OverflowError, ValueError) as exc:
        raise ValidationError("rating must be a number") from exc
    return max(MIN_RATING, min(MAX_RATING, rating))


def _required_text(value: object, field_name: str) -> str:
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise ValidationError(f"{field_name} is required")
    return text


def _optional_text(value: object) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError("image must be a string")
    return value.strip()


def _parse_product_id(product_id: str | UUID) -> UUID:
    if isinstance(product_id, UUID):
        return product_id
    try:
        return UUID(str(product_id))
    except ValueError as exc:
        raise NotFound() from exc

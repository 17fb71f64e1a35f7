"""Domain models for the product catalog."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

MIN_RATING = 1
MAX_RATING = 5
DEFAULT_RATING = 5


@dataclass(frozen=True)
class Product:
    """A catalog entry."""

    id: UUID
    name: str
    price: str
    rating: int
    image: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ProductSeed:
    """Attributes of a product shipped with the storefront."""

    name: str
    price: str
    image: str
    rating: int = DEFAULT_RATING


DEFAULT_PRODUCTS: tuple[ProductSeed, ...] = (
    ProductSeed(
        name="Custom Name Insulated Bottle",
        price="Rs. 4,950",
        image=(
            "https://images.pexels.com/photos/3259629/pexels-photo-3259629.jpeg"
            "?auto=compress&cs=tinysrgb&w=800"
        ),
    ),
    ProductSeed(
        name="Executive Corporate Gift Set",
        price="Rs. 12,500",
        image=(
            "https://images.pexels.com/photos/4065405/pexels-photo-4065405.jpeg"
            "?auto=compress&cs=tinysrgb&w=800"
        ),
    ),
    ProductSeed(
        name="Premium Desk Essentials Kit",
        price="Rs. 9,900",
        image=(
            "https://images.pexels.com/photos/3787321/pexels-photo-3787321.jpeg"
            "?auto=compress&cs=tinysrgb&w=800"
        ),
    ),
)

_DEMO_TIMESTAMP = datetime(2024, 1, 1, tzinfo=UTC)


def demo_products() -> list[Product]:
    """Return the offline demonstration catalog."""
    return [
        Product(
            id=UUID(int=index),
            name=seed.name,
            price=seed.price,
            rating=seed.rating,
            image=seed.image,
            created_at=_DEMO_TIMESTAMP,
            updated_at=_DEMO_TIMESTAMP,
        )
        for index, seed in enumerate(DEFAULT_PRODUCTS, start=1)
    ]


def parse_product(row: dict[str, object]) -> Product:
    """Parse a stored or serialized product row into a domain model."""
    return Product(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        price=str(row.get("price", "")),
        rating=int(row.get("rating") or DEFAULT_RATING),
        image=str(row.get("image") or ""),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def serialize_product(product: Product) -> dict[str, object]:
    """Return a JSON-friendly representation of a product."""
    return {
        "id": str(product.id),
        "name": product.name,
        "price": product.price,
        "rating": product.rating,
        "image": product.image,
        "created_at": product.created_at.isoformat(),
        "updated_at": product.updated_at.isoformat(),
    }


def _parse_timestamp(raw: object) -> datetime:
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return datetime.min.replace(tzinfo=UTC)

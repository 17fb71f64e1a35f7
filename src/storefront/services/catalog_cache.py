"""Client-side view of the catalog with an explicit demo-data fallback."""

import logging
from dataclasses import dataclass, field
from uuid import UUID

from storefront.adapters.catalog_client import CatalogClient
from storefront.domain.errors import StorefrontError
from storefront.domain.products import Product, demo_products

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of fetching the catalog: products or an error, never both."""

    products: list[Product] | None = None
    error: StorefrontError | None = None

    @property
    def ok(self) -> bool:
        """Return true when the fetch succeeded."""
        return self.error is None


@dataclass
class CatalogCache:
    """Holds the product list a storefront client renders."""

    client: CatalogClient
    products: list[Product] = field(default_factory=list)
    is_demo: bool = False

    async def fetch(self) -> FetchResult:
        """Fetch the catalog without touching the held view."""
        try:
            products = await self.client.list_products()
        except StorefrontError as exc:
            return FetchResult(error=exc)
        return FetchResult(products=products)

    async def load(self, fallback_to_demo: bool = False) -> FetchResult:
        """Fetch and adopt the catalog.

        When the fetch fails and ``fallback_to_demo`` is set, the demo
        catalog is adopted and ``is_demo`` is raised; otherwise the fetch
        error propagates.
        """
        result = await self.fetch()
        if result.ok:
            self.products = list(result.products or [])
            self.is_demo = False
            return result
        if not fallback_to_demo:
            raise result.error
        logger.warning(
            "Catalog unavailable, showing demo products",
            extra={"error": str(result.error)},
        )
        self.products = demo_products()
        self.is_demo = True
        return result

    async def add_product(self, token: str, payload: dict[str, object]) -> Product:
        """Create a product and insert it at the front of the view."""
        product = await self.client.create_product(token, payload)
        self.products.insert(0, product)
        return product

    async def update_product(
        self, token: str, product_id: UUID, payload: dict[str, object]
    ) -> Product:
        """Update a product and replace it in place."""
        product = await self.client.update_product(token, product_id, payload)
        self.products = [
            product if existing.id == product.id else existing
            for existing in self.products
        ]
        return product

    async def delete_product(self, token: str, product_id: UUID) -> None:
        """Delete a product and drop it from the view."""
        await self.client.delete_product(token, product_id)
        self.products = [
            existing for existing in self.products if existing.id != product_id
        ]

    async def upload_image(self, token: str, filename: str, content: bytes) -> str:
        """Upload an image; the view is unchanged."""
        return await self.client.upload_image(token, filename, content)

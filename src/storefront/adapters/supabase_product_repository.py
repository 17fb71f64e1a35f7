"""Supabase-backed product repository."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from storefront.domain.errors import StorageUnavailable
from storefront.domain.products import Product, parse_product
from storefront.services.catalog import ProductRepository


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    """Translate Supabase client failures into StorageUnavailable."""
    try:
        yield
    except (APIError, httpx.HTTPError) as exc:
        raise StorageUnavailable(f"Failed to {action}") from exc


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase implementation for product persistence."""

    client: Client
    table_name: str = "products"

    def list_products(self) -> list[Product]:
        """Return all products ordered by creation time, newest first."""
        with _storage_errors("list products"):
            response = (
                self.client.table(self.table_name)
                .select("*")
                .order("created_at", desc=True)
                .execute()
            )
        return [parse_product(row) for row in response.data or []]

    def count_products(self) -> int:
        """Return the number of stored products."""
        with _storage_errors("count products"):
            response = (
                self.client.table(self.table_name)
                .select("id", count="exact")
                .execute()
            )
        count = getattr(response, "count", None)
        if count is None:
            return len(response.data or [])
        return int(count)

    def get_product(self, product_id: UUID) -> Product | None:
        """Return a product by id, if present."""
        with _storage_errors("fetch product"):
            response = (
                self.client.table(self.table_name)
                .select("*")
                .eq("id", str(product_id))
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return parse_product(response.data[0])

    def create_product(self, payload: dict[str, object]) -> Product:
        """Insert a product row and return it."""
        with _storage_errors("create product"):
            response = self.client.table(self.table_name).insert(payload).execute()
        if not response.data:
            raise StorageUnavailable("Failed to create product")
        return parse_product(response.data[0])

    def create_products(self, payloads: list[dict[str, object]]) -> list[Product]:
        """Insert several product rows in one request."""
        with _storage_errors("create products"):
            response = self.client.table(self.table_name).insert(payloads).execute()
        return [parse_product(row) for row in response.data or []]

    def update_product(
        self, product_id: UUID, payload: dict[str, object]
    ) -> Product | None:
        """Update a product row; None when the id matched nothing."""
        with _storage_errors("update product"):
            response = (
                self.client.table(self.table_name)
                .update(payload)
                .eq("id", str(product_id))
                .execute()
            )
        if not response.data:
            return None
        return parse_product(response.data[0])

    def delete_product(self, product_id: UUID) -> bool:
        """Delete a product row; False when the id matched nothing."""
        with _storage_errors("delete product"):
            response = (
                self.client.table(self.table_name)
                .delete()
                .eq("id", str(product_id))
                .execute()
            )
        return bool(response.data)

"""HTTP client for the storefront catalog API."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

import httpx

from storefront.domain.errors import (
    NoFileProvided,
    NotFound,
    StorageUnavailable,
    StorefrontError,
    Unauthorized,
    ValidationError,
)
from storefront.domain.products import Product, parse_product


class CatalogClient(Protocol):
    """Interface for talking to the catalog API."""

    async def login(self, password: str) -> str:
        """Exchange the admin password for a session token."""

    async def list_products(self) -> list[Product]:
        """Fetch the public product list."""

    async def create_product(self, token: str, payload: dict[str, object]) -> Product:
        """Create a product."""

    async def update_product(
        self, token: str, product_id: UUID, payload: dict[str, object]
    ) -> Product:
        """Update a product."""

    async def delete_product(self, token: str, product_id: UUID) -> None:
        """Delete a product."""

    async def upload_image(self, token: str, filename: str, content: bytes) -> str:
        """Upload an image and return its URL."""


@dataclass
class HttpxCatalogClient(CatalogClient):
    """Catalog client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(cls, base_url: str) -> "HttpxCatalogClient":
        """Create a catalog client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def login(self, password: str) -> str:
        """Exchange the admin password for a session token."""
        data = await self._request(
            "POST", "/api/auth/login", json={"password": password}
        )
        return str(data["token"])

    async def list_products(self) -> list[Product]:
        """Fetch the public product list."""
        data = await self._request("GET", "/api/products")
        if not isinstance(data, list):
            raise StorageUnavailable("Unexpected product list payload")
        return [parse_product(row) for row in data]

    async def create_product(self, token: str, payload: dict[str, object]) -> Product:
        """Create a product."""
        data = await self._request("POST", "/api/products", token=token, json=payload)
        return parse_product(data)

    async def update_product(
        self, token: str, product_id: UUID, payload: dict[str, object]
    ) -> Product:
        """Update a product."""
        data = await self._request(
            "PUT", f"/api/products/{product_id}", token=token, json=payload
        )
        return parse_product(data)

    async def delete_product(self, token: str, product_id: UUID) -> None:
        """Delete a product."""
        await self._request("DELETE", f"/api/products/{product_id}", token=token)

    async def upload_image(self, token: str, filename: str, content: bytes) -> str:
        """Upload an image and return its URL."""
        data = await self._request(
            "POST",
            "/api/upload",
            token=token,
            files={"image": (filename, content)},
        )
        return str(data["url"])

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        token: str | None = None,
        **kwargs: object,
    ) -> object:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        try:
            response = await self.http_client.request(
                method,
                f"{self.base_url}{path}",
                headers=headers,
                timeout=self.timeout,
                **kwargs,
            )
        except httpx.HTTPError as exc:
            raise StorageUnavailable("Unable to connect to server") from exc
        if response.is_success:
            return response.json()
        raise _error_from_response(response, path)


def _error_from_response(response: httpx.Response, path: str) -> StorefrontError:
    """Map an error response onto the storefront error taxonomy."""
    try:
        body = response.json()
    except ValueError:
        body = None
    message = body.get("error") if isinstance(body, dict) else None
    status = response.status_code
    if status == httpx.codes.UNAUTHORIZED:
        return Unauthorized(message)
    if status == httpx.codes.NOT_FOUND:
        return NotFound(message)
    if status == httpx.codes.BAD_REQUEST:
        if path == "/api/upload":
            return NoFileProvided(message)
        return ValidationError(message)
    return StorageUnavailable(message or f"Request failed with status {status}")

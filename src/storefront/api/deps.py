"""Request dependencies shared by the API routers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, Request

from storefront.domain.auth import SessionClaims  # noqa: TC001
from storefront.domain.errors import Unauthorized

if TYPE_CHECKING:
    from storefront.containers import AppContainer

_BEARER_PREFIX = "Bearer "


def get_container(request: Request) -> AppContainer:
    """Return the application container."""
    return request.app.state.container


async def require_admin(
    request: Request,
    authorization: str | None = Header(default=None),
) -> SessionClaims:
    """Verify the bearer token and record the admin identity on the request."""
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        raise Unauthorized()
    container = get_container(request)
    claims = container.auth_service.verify(authorization[len(_BEARER_PREFIX) :])
    request.state.admin = claims
    return claims

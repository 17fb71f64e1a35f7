"""Admin login endpoint."""

from fastapi import APIRouter, Request

from storefront.api.deps import get_container
from storefront.api.schemas import LoginRequest, TokenResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login")
async def login(payload: LoginRequest, request: Request) -> TokenResponse:
    """Exchange the admin password for a session token."""
    container = get_container(request)
    token = container.auth_service.login(payload.password or "")
    return TokenResponse(token=token)

"""Image upload endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Request, UploadFile

from storefront.api.deps import get_container, require_admin
from storefront.api.schemas import UploadResponse
from storefront.domain.auth import SessionClaims

router = APIRouter(prefix="/api", tags=["uploads"])


@router.post("/upload")
async def upload_image(
    request: Request,
    claims: Annotated[SessionClaims, Depends(require_admin)],
    image: Annotated[UploadFile | str | None, File()] = None,
) -> UploadResponse:
    """Store an uploaded image and return its URL."""
    container = get_container(request)
    # A part sent with an empty filename arrives as a plain form string.
    if image is None or isinstance(image, str):
        url = container.upload_service.store(claims, None, None)
    else:
        url = container.upload_service.store(
            claims, await image.read(), image.filename
        )
    return UploadResponse(url=url)

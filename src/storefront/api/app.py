"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from storefront.api.auth import router as auth_router
from storefront.api.products import router as products_router
from storefront.api.uploads import router as uploads_router
from storefront.app_logging import configure_logging
from storefront.config import parse_allowed_origins
from storefront.containers import AppContainer
from storefront.domain.errors import StorefrontError
from storefront.services.uploads import UPLOADS_URL_PREFIX


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.catalog_service.seed_defaults()
        except Exception:
            logger.exception("Failed to seed default products")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    allowed_origins = parse_allowed_origins(container.settings.cors_allowed_origins)
    if allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(
        request: Request, exc: StorefrontError
    ) -> JSONResponse:
        if exc.status_code >= 500:  # noqa: PLR2004
            logger.error(
                "Request failed",
                extra={"path": request.url.path, "error": exc.message},
                exc_info=exc,
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = [str(error.get("msg", "")) for error in exc.errors()]
        return JSONResponse(
            status_code=400,
            content={"error": "; ".join(filter(None, messages)) or "Invalid request"},
        )

    app.include_router(auth_router)
    app.include_router(products_router)
    app.include_router(uploads_router)

    upload_dir = Path(container.settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount(
        UPLOADS_URL_PREFIX,
        StaticFiles(directory=upload_dir),
        name="uploads",
    )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app

"""Shared test fixtures."""

from datetime import timedelta
from pathlib import Path

import pytest

from storefront.config import Settings
from storefront.containers import AppContainer
from storefront.services.auth import AuthService, SharedPasswordCredentialStore
from storefront.services.catalog import CatalogService
from storefront.services.uploads import UploadService
from tests.fakes import (
    ADMIN_PASSWORD,
    JWT_SECRET,
    FakeClock,
    InMemoryProductRepository,
)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
        jwt_secret=JWT_SECRET,
        admin_password=ADMIN_PASSWORD,
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def auth_service() -> AuthService:
    return AuthService(
        credentials=SharedPasswordCredentialStore(ADMIN_PASSWORD),
        secret=JWT_SECRET,
        token_ttl=timedelta(hours=8),
    )


@pytest.fixture
def admin_claims(auth_service: AuthService):
    return auth_service.verify(auth_service.login(ADMIN_PASSWORD))


@pytest.fixture
def container(
    settings: Settings,
    product_repository: InMemoryProductRepository,
    auth_service: AuthService,
    clock: FakeClock,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        auth_service=auth_service,
        catalog_service=CatalogService(product_repository, clock=clock),
        upload_service=UploadService(Path(settings.upload_dir)),
    )

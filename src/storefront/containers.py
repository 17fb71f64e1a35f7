"""Dependency container wiring for the application."""

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from supabase import create_client

from storefront.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from storefront.config import Settings
from storefront.services.auth import AuthService, SharedPasswordCredentialStore
from storefront.services.catalog import CatalogService
from storefront.services.uploads import UploadService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    catalog_service: CatalogService
    upload_service: UploadService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    product_repository = SupabaseProductRepository(
        supabase_client, table_name=resolved_settings.products_table
    )
    auth_service = AuthService(
        credentials=SharedPasswordCredentialStore(resolved_settings.admin_password),
        secret=resolved_settings.jwt_secret,
        token_ttl=timedelta(hours=resolved_settings.token_ttl_hours),
    )
    catalog_service = CatalogService(product_repository)
    upload_service = UploadService(Path(resolved_settings.upload_dir))

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        catalog_service=catalog_service,
        upload_service=upload_service,
    )

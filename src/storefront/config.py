"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    jwt_secret: str
    admin_password: str
    products_table: str = "products"
    upload_dir: str = "uploads"
    token_ttl_hours: int = 8
    port: int = 4000
    log_level: str = "INFO"
    cors_allowed_origins: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse comma-separated CORS origins from env."""
    if raw is None:
        return []
    origins: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if value and value not in origins:
            origins.append(value)
    return origins

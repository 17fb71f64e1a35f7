"""ASGI entrypoint for the storefront API."""

from storefront.api.app import create_app
from storefront.containers import build_container

app = create_app(build_container())

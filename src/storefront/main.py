"""Run the storefront API with uvicorn."""

import uvicorn

from storefront.api.app import create_app
from storefront.config import Settings
from storefront.containers import build_container


def main() -> None:
    """Serve the API on the configured port."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(app, host="0.0.0.0", port=settings.port)  # noqa: S104


if __name__ == "__main__":
    main()

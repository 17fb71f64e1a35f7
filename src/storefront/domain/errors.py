"""Error taxonomy shared by the catalog services and the HTTP layer."""


class StorefrontError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(StorefrontError):
    """A required field is missing or invalid."""

    status_code = 400
    default_message = "Invalid product data"


class Unauthorized(StorefrontError):
    """Missing, invalid or expired credentials."""

    status_code = 401
    default_message = "Unauthorised"


class NotFound(StorefrontError):
    """The referenced product does not exist."""

    status_code = 404
    default_message = "Product not found"


class NoFileProvided(StorefrontError):
    """An upload request carried no file payload."""

    status_code = 400
    default_message = "No file uploaded"


class StorageUnavailable(StorefrontError):
    """The backing store could not be reached."""

    status_code = 500
    default_message = "Storage unavailable"

"""Image upload storage on the local filesystem."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from storefront.domain.auth import SessionClaims
from storefront.domain.errors import NoFileProvided, StorageUnavailable
from storefront.services.auth import require_role

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads"
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9.\-_]")


def sanitize_filename(filename: str) -> str:
    """Replace every character outside [A-Za-z0-9.-_] with an underscore."""
    return _UNSAFE_FILENAME_CHARS.sub("_", filename)


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class UploadService:
    """Stores uploaded images under generated names."""

    upload_dir: Path
    clock: Callable[[], datetime] = field(default=_utcnow)

    def generate_filename(self, original_filename: str) -> str:
        """Return `<epoch-ms>-<sanitized name>` for an incoming file."""
        now = self.clock()
        millis = int(now.timestamp()) * 1000 + now.microsecond // 1000
        return f"{millis}-{sanitize_filename(original_filename)}"

    def store(
        self,
        claims: SessionClaims,
        content: bytes | None,
        original_filename: str | None,
    ) -> str:
        """Write the file and return its public relative URL."""
        require_role(claims)
        if content is None or not original_filename:
            raise NoFileProvided()
        filename = self.generate_filename(original_filename)
        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            (self.upload_dir / filename).write_bytes(content)
        except OSError as exc:
            logger.exception(
                "Failed to write upload", extra={"upload_filename": filename}
            )
            raise StorageUnavailable("Failed to store upload") from exc
        logger.info(
            "Stored upload",
            extra={"upload_filename": filename, "size_bytes": len(content)},
        )
        return f"{UPLOADS_URL_PREFIX}/{filename}"

"""Admin authentication: shared-password login and signed session tokens."""

import hmac
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol

from authlib.jose import JoseError, jwt

from storefront.domain.auth import ADMIN_ROLE, SessionClaims
from storefront.domain.errors import Unauthorized

logger = logging.getLogger(__name__)

TOKEN_ALGORITHM = "HS256"
DEFAULT_TOKEN_TTL = timedelta(hours=8)


class CredentialStore(Protocol):
    """Resolves a presented credential to a role."""

    def authenticate(self, password: str) -> str | None:
        """Return the role granted by the password, or None."""


@dataclass
class SharedPasswordCredentialStore(CredentialStore):
    """Single shared admin password granting the admin role."""

    password: str
    role: str = ADMIN_ROLE

    def authenticate(self, password: str) -> str | None:
        """Return the admin role when the password matches exactly."""
        if not password or not self.password:
            return None
        if hmac.compare_digest(password.encode(), self.password.encode()):
            return self.role
        return None


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class AuthService:
    """Issues and verifies stateless admin session tokens."""

    credentials: CredentialStore
    secret: str
    token_ttl: timedelta = DEFAULT_TOKEN_TTL
    clock: Callable[[], datetime] = field(default=_utcnow)

    def login(self, password: str) -> str:
        """Exchange the admin password for a signed session token."""
        role = self.credentials.authenticate(password)
        if role is None:
            logger.info("Rejected admin login attempt")
            raise Unauthorized("Incorrect password")
        issued_at = self.clock()
        payload = {
            "role": role,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.token_ttl).timestamp()),
        }
        token = jwt.encode({"alg": TOKEN_ALGORITHM}, payload, self.secret)
        return token.decode("utf-8")

    def verify(self, token: str | None) -> SessionClaims:
        """Check signature and expiry, returning the decoded claims."""
        if not token:
            raise Unauthorized()
        try:
            claims = jwt.decode(
                token,
                self.secret,
                claims_options={
                    "exp": {"essential": True},
                    "role": {"essential": True},
                },
            )
            claims.validate(now=int(self.clock().timestamp()), leeway=0)
        except (JoseError, ValueError) as exc:
            raise Unauthorized("Invalid or expired token") from exc
        return SessionClaims(
            role=str(claims["role"]),
            issued_at=datetime.fromtimestamp(int(claims.get("iat", 0)), tz=UTC),
            expires_at=datetime.fromtimestamp(int(claims["exp"]), tz=UTC),
        )


def require_role(claims: SessionClaims | None, role: str = ADMIN_ROLE) -> None:
    """Ensure the caller's verified claims carry the given role."""
    if claims is None or claims.role != role:
        raise Unauthorized()

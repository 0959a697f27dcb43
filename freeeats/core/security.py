"""
Identity token verification.

Session tokens are issued by the external identity provider (Clerk). They
are verified against the provider's JWKS when one is configured; otherwise
an HS256 shared secret is used, which is what local development and the
test suite sign with. Production deployments must configure a JWKS URL;
shared-secret tokens are refused there.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from freeeats.config.settings import Settings
from freeeats.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Identity:
    """Authenticated caller as described by the identity provider."""

    subject: str
    name: Optional[str] = None
    email: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "Identity":
        name = claims.get("name")
        if not name:
            name = " ".join(
                part for part in (claims.get("given_name"), claims.get("family_name")) if part
            ) or None
        return cls(
            subject=claims["sub"],
            name=name,
            email=claims.get("email"),
            image_url=claims.get("picture") or claims.get("image_url"),
        )


class TokenVerifier:
    """
    Verifies identity-provider JWTs.

    Raises jwt.InvalidTokenError (or a subclass) on any failure.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._jwks_client: Optional[jwt.PyJWKClient] = None
        if settings.CLERK_JWKS_URL:
            self._jwks_client = jwt.PyJWKClient(settings.CLERK_JWKS_URL)
        elif settings.is_production():
            logger.error("CLERK_JWKS_URL is not set; all bearer tokens will be rejected")

    @property
    def accepts_shared_secret(self) -> bool:
        return self._jwks_client is None and not self.settings.is_production()

    def verify(self, token: str) -> Identity:
        options = {"require": ["sub"]}
        if self._jwks_client is not None:
            signing_key = self._jwks_client.get_signing_key_from_jwt(token)
            claims = jwt.decode(
                token,
                signing_key.key,
                algorithms=["RS256"],
                issuer=self.settings.CLERK_ISSUER,
                options={**options, "verify_iss": bool(self.settings.CLERK_ISSUER)},
            )
        elif self.accepts_shared_secret:
            claims = jwt.decode(
                token,
                self.settings.JWT_SECRET_KEY,
                algorithms=[self.settings.JWT_ALGORITHM],
                options=options,
            )
        else:
            raise jwt.InvalidTokenError("Shared-secret tokens are not accepted in production")
        return Identity.from_claims(claims)


def create_dev_token(
    settings: Settings,
    subject: str,
    name: Optional[str] = None,
    email: Optional[str] = None,
    expires_delta: timedelta = timedelta(hours=1),
) -> str:
    """Sign a token with the local secret (development and tests)."""
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {"sub": subject, "iat": now, "exp": now + expires_delta}
    if name:
        payload["name"] = name
    if email:
        payload["email"] = email
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

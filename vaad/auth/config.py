"""Explicit configuration object for the admin session gate."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from vaad.core.settings import Settings

from .exceptions import ConfigurationError

SESSION_COOKIE_NAME = "auth-token"
JWT_ALGORITHM = "HS256"
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_TOKEN_TTL = timedelta(hours=24)


@dataclass(frozen=True)
class AuthConfig:
    """
    Read-only auth configuration, built once at startup.

    Attributes:
        secret_key: Symmetric key for signing session tokens
        password_hash: bcrypt hash of the shared admin password
        token_ttl: Lifetime of a freshly issued session token
        cookie_secure: Whether the session cookie carries the Secure flag
    """

    secret_key: Optional[str]
    password_hash: Optional[str] = None
    token_ttl: timedelta = DEFAULT_TOKEN_TTL
    cookie_secure: bool = False
    cookie_name: str = SESSION_COOKIE_NAME

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthConfig":
        cookie_secure = settings.cookie_secure
        if cookie_secure is None:
            cookie_secure = settings.is_production

        return cls(
            secret_key=settings.jwt_secret_key or None,
            password_hash=(settings.admin_password_hash or "").strip() or None,
            token_ttl=timedelta(hours=settings.session_ttl_hours),
            cookie_secure=cookie_secure,
        )

    @property
    def cookie_max_age(self) -> int:
        return int(self.token_ttl.total_seconds())

    def require_signing_key(self) -> str:
        """
        Return the signing key, refusing absent or weak keys.

        Raises:
            ConfigurationError: If the key is missing or too short
        """
        if not self.secret_key:
            raise ConfigurationError("JWT_SECRET_KEY is not set")
        if len(self.secret_key) < MIN_SECRET_KEY_LENGTH:
            raise ConfigurationError(
                f"JWT_SECRET_KEY must be at least {MIN_SECRET_KEY_LENGTH} characters"
            )
        return self.secret_key

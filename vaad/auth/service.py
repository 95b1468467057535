"""Authentication service - admin login and stateless session tokens."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from .config import JWT_ALGORITHM, AuthConfig
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    InvalidSessionError,
    MalformedTokenError,
    TokenExpiredError,
    TokenSignatureError,
)
from .models import Role, SessionClaims
from .passwords import verify_password

logger = logging.getLogger(__name__)

WRONG_PASSWORD_MESSAGE = "סיסמה שגויה"

REQUIRED_CLAIMS = ["exp", "iat", "role"]


class AuthService:
    """Service for admin login and session token handling.

    Holds no state besides its configuration: tokens are verified purely
    from their signature and timestamps, without any database lookup.
    """

    def __init__(self, config: AuthConfig):
        self.config = config

    def authenticate(self, password: str) -> Role:
        """
        Check the submitted admin password.

        Args:
            password: Password as typed by the user

        Returns:
            The role granted by the password

        Raises:
            AuthenticationError: If the password is wrong or no hash is configured
        """
        if not self.config.password_hash:
            logger.error("ADMIN_PASSWORD_HASH is not configured, rejecting login")
            raise AuthenticationError(WRONG_PASSWORD_MESSAGE)

        if not verify_password(password, self.config.password_hash):
            logger.warning("Admin login failed: wrong password")
            raise AuthenticationError(WRONG_PASSWORD_MESSAGE)

        logger.info("Admin login succeeded")
        return Role.ADMIN

    def issue_token(
        self,
        role: Role = Role.ADMIN,
        ttl: Optional[timedelta] = None,
        now: Optional[datetime] = None,
    ) -> tuple[str, datetime]:
        """
        Create a signed session token for a role.

        Args:
            role: Role claim to embed
            ttl: Token lifetime (defaults to the configured TTL)
            now: Issue time (defaults to the current UTC time)

        Returns:
            Tuple of (token string, expiration datetime)

        Raises:
            ConfigurationError: If the signing key is missing or weak
        """
        secret_key = self.config.require_signing_key()

        if ttl is None:
            ttl = self.config.token_ttl
        issued_at = now or datetime.now(timezone.utc)
        expires_at = issued_at + ttl

        payload = {
            "role": Role(role).value,
            "iat": issued_at,
            "exp": expires_at,
        }

        token = jwt.encode(payload, secret_key, algorithm=JWT_ALGORITHM)
        return token, expires_at

    def decode_token(self, token: str) -> SessionClaims:
        """
        Verify a session token and return its claims.

        The signature is checked before the payload is trusted, and a token
        is expired once the current time reaches its ``exp`` claim.

        Args:
            token: Token string taken from the session cookie

        Returns:
            SessionClaims for a valid token

        Raises:
            MalformedTokenError: Token is not a parseable JWT or lacks claims
            TokenSignatureError: Signature does not match the signing key
            TokenExpiredError: Token is past its expiry
            ConfigurationError: No usable signing key is configured
        """
        secret_key = self.config.require_signing_key()

        if not token:
            raise MalformedTokenError("Empty token")

        try:
            payload = jwt.decode(
                token,
                secret_key,
                algorithms=[JWT_ALGORITHM],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpiredError("Token has expired")
        except jwt.InvalidSignatureError:
            raise TokenSignatureError("Token signature mismatch")
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(f"Invalid token: {e}")

        try:
            role = Role(payload["role"])
        except ValueError:
            raise MalformedTokenError(f"Unknown role claim: {payload['role']!r}")

        return SessionClaims(
            role=role,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    def verify_session(self, token: Optional[str]) -> Optional[SessionClaims]:
        """
        Verify a token, collapsing every failure into None.

        The specific reason is logged but never returned, so callers cannot
        tell an expired token from a forged one.
        """
        try:
            return self.decode_token(token or "")
        except InvalidSessionError as e:
            logger.warning(f"Rejected session token ({e.reason})")
            return None
        except ConfigurationError as e:
            logger.error(f"Cannot verify session tokens: {e}")
            return None

    def verify_token(self, token: Optional[str]) -> Optional[Role]:
        """Return the role claim of a valid token, or None."""
        claims = self.verify_session(token)
        return claims.role if claims else None

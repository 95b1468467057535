"""Authentication module for the shared admin login."""

from .config import AuthConfig, SESSION_COOKIE_NAME
from .deps import AdminSession, OptionalSession, get_auth_config, require_admin
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    InvalidSessionError,
)
from .models import Role, SessionClaims
from .router import router as auth_router
from .service import AuthService

__all__ = [
    "auth_router",
    "AdminSession",
    "OptionalSession",
    "AuthConfig",
    "AuthService",
    "AuthenticationError",
    "ConfigurationError",
    "InvalidSessionError",
    "Role",
    "SESSION_COOKIE_NAME",
    "SessionClaims",
    "get_auth_config",
    "require_admin",
]

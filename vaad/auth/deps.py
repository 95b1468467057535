"""FastAPI dependencies for the admin request gate."""

import logging
from typing import Annotated, Optional

from fastapi import Cookie, Depends, HTTPException, Request, status

from vaad.core.settings import settings

from .config import SESSION_COOKIE_NAME, AuthConfig
from .models import SessionClaims
from .service import AuthService

logger = logging.getLogger(__name__)

ADMIN_REQUIRED_MESSAGE = "נדרשת הרשאת מנהל"


def get_auth_config() -> AuthConfig:
    """Build the auth configuration from process settings.

    Tests override this dependency to run with their own keys.
    """
    return AuthConfig.from_settings(settings)


def get_auth_service(
    config: AuthConfig = Depends(get_auth_config),
) -> AuthService:
    return AuthService(config)


async def require_admin(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
    auth_token: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
) -> SessionClaims:
    """
    FastAPI dependency guarding administrative routes.

    Reads the session cookie and verifies it without touching the database.
    Missing and invalid tokens get the same 401 response.

    Args:
        request: Incoming request, receives the role on success
        auth_service: Service holding the signing configuration
        auth_token: Session token from the auth-token cookie

    Returns:
        SessionClaims of the verified session

    Raises:
        HTTPException 401: If no valid admin session is presented
    """
    if not auth_token:
        logger.info(f"No session cookie on protected route {request.url.path}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ADMIN_REQUIRED_MESSAGE,
        )

    claims = auth_service.verify_session(auth_token)
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ADMIN_REQUIRED_MESSAGE,
        )

    request.state.role = claims.role
    return claims


async def get_optional_session(
    auth_service: AuthService = Depends(get_auth_service),
    auth_token: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
) -> Optional[SessionClaims]:
    """
    Optional version of require_admin.

    Returns None instead of raising if there is no valid session.
    """
    if not auth_token:
        return None
    return auth_service.verify_session(auth_token)


# Type aliases for cleaner dependency injection
AdminSession = Annotated[SessionClaims, Depends(require_admin)]
OptionalSession = Annotated[Optional[SessionClaims], Depends(get_optional_session)]

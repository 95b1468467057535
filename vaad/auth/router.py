"""Authentication API router."""

import logging

from fastapi import APIRouter, Cookie, Depends, Response, status

from .config import SESSION_COOKIE_NAME, AuthConfig
from .deps import get_auth_config, get_auth_service
from .exceptions import AuthenticationError
from .schemas import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    SessionResponse,
    SessionUser,
)
from .service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def set_session_cookie(response: Response, token: str, config: AuthConfig) -> None:
    """Store a session token in the HttpOnly auth cookie."""
    response.set_cookie(
        key=config.cookie_name,
        value=token,
        httponly=True,
        secure=config.cookie_secure,
        samesite="lax",
        max_age=config.cookie_max_age,
        path="/",
    )


def clear_session_cookie(response: Response, config: AuthConfig) -> None:
    """Overwrite the auth cookie with an empty, immediately expired one."""
    response.set_cookie(
        key=config.cookie_name,
        value="",
        httponly=True,
        secure=config.cookie_secure,
        samesite="lax",
        max_age=0,
        path="/",
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    response: Response,
    login_data: LoginRequest,
    config: AuthConfig = Depends(get_auth_config),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Log in with the shared admin password.

    On success the session token is set as the auth-token cookie.
    """
    try:
        role = auth_service.authenticate(login_data.password)
    except AuthenticationError as e:
        response.status_code = status.HTTP_401_UNAUTHORIZED
        return LoginResponse(success=False, error=str(e))

    token, expires_at = auth_service.issue_token(role)
    set_session_cookie(response, token, config)

    logger.info(f"Issued {role.value} session token, expires {expires_at.isoformat()}")
    return LoginResponse(success=True)


@router.get("/session", response_model=SessionResponse)
async def check_session(
    response: Response,
    config: AuthConfig = Depends(get_auth_config),
    auth_service: AuthService = Depends(get_auth_service),
    auth_token: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
):
    """
    Report whether the caller holds a valid admin session.

    Always answers 200; the boolean tells the client what it needs to know.
    A cookie that fails verification is cleared so the client stops
    sending it.
    """
    if not auth_token:
        return SessionResponse(authenticated=False, user=None)

    claims = auth_service.verify_session(auth_token)
    if claims is None:
        clear_session_cookie(response, config)
        return SessionResponse(authenticated=False, user=None)

    return SessionResponse(
        authenticated=True,
        user=SessionUser(role=claims.role.value),
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    config: AuthConfig = Depends(get_auth_config),
):
    """
    Log out by clearing the session cookie.

    Tokens are not revoked server-side: a copy of the token taken before
    logout stays valid until it expires.
    """
    clear_session_cookie(response, config)
    logger.info("Admin session cookie cleared")
    return LogoutResponse()

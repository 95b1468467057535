"""Pydantic schemas for admin authentication."""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request schema for admin login."""

    password: str = Field(..., description="Shared admin password")


class LoginResponse(BaseModel):
    """Response schema for a login attempt."""

    success: bool
    error: Optional[str] = None


class SessionUser(BaseModel):
    """Role asserted by the current session."""

    role: str


class SessionResponse(BaseModel):
    """Response schema for the session check endpoint."""

    authenticated: bool
    user: Optional[SessionUser] = None


class LogoutResponse(BaseModel):
    """Response schema for logout."""

    success: bool = True

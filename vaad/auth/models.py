"""Domain types for admin sessions.

There is no session table: a signed token carries the whole session, so
these are plain value types rather than ORM models.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    """Role claims a session token may assert."""
    ADMIN = "admin"


@dataclass(frozen=True)
class SessionClaims:
    """Decoded, verified contents of a session token."""

    role: Role
    issued_at: datetime
    expires_at: datetime

from __future__ import annotations

from typing import Generator

from sqlalchemy.orm import Session

from vaad.db.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """Request-scoped database session, closed after the response."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

"""
Pytest fixtures for the portal backend tests.

Provides auth configurations with per-test signing keys, mock database
sessions, and a TestClient wired to both through dependency overrides.
"""
from datetime import datetime
from typing import Any, List, Optional
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from vaad.auth.config import AuthConfig
from vaad.auth.deps import get_auth_config
from vaad.auth.passwords import hash_password
from vaad.auth.service import AuthService
from vaad.db.deps import get_db
from vaad.main import app
from vaad.models import Base

ADMIN_PASSWORD = "admin1"
TEST_SECRET_KEY = "test-signing-key-0123456789abcdefghijklmnop"
OTHER_SECRET_KEY = "another-signing-key-abcdefghijklmnop0123456789"


class MockTask:
    """Mock Task model for testing."""

    def __init__(
        self,
        id: int,
        title: str,
        owner_name: str = "Dana Levi",
        description: Optional[str] = None,
        priority: str = "normal",
        status: str = "pending",
        due_date: Optional[datetime] = None,
    ):
        self.id = id
        self.title = title
        self.description = description
        self.priority = priority
        self.status = status
        self.owner_name = owner_name
        self.owner_phone = None
        self.due_date = due_date or datetime(2026, 11, 1, 18, 0)
        self.reminder_date = None
        self.assigned_by = "admin"
        self.created_at = datetime(2026, 10, 1, 9, 0)
        self.updated_at = None


class MockVendor:
    """Mock Vendor model for testing."""

    def __init__(
        self,
        id: int,
        name: str,
        category: str = "catering",
        description: Optional[str] = None,
        status: str = "active",
        contact_person: Optional[str] = None,
    ):
        self.id = id
        self.name = name
        self.description = description
        self.category = category
        self.contact_person = contact_person
        self.phone = None
        self.email = None
        self.website = None
        self.address = None
        self.notes = None
        self.status = status
        self.created_at = datetime(2026, 9, 1, 9, 0)
        self.updated_at = None


class MockQuery:
    """Mock SQLAlchemy query object for testing."""

    def __init__(self, results: Optional[List[Any]] = None):
        self._results = results or []

    def filter(self, *args, **kwargs):
        return self

    def order_by(self, *args, **kwargs):
        return self

    def limit(self, n):
        return self

    def first(self):
        return self._results[0] if self._results else None

    def all(self):
        return self._results


@pytest.fixture(scope="session")
def admin_password_hash():
    """bcrypt hash of ADMIN_PASSWORD, low cost to keep tests fast."""
    return hash_password(ADMIN_PASSWORD, rounds=4)


@pytest.fixture
def auth_config(admin_password_hash):
    return AuthConfig(
        secret_key=TEST_SECRET_KEY,
        password_hash=admin_password_hash,
        cookie_secure=False,
    )


@pytest.fixture
def auth_service(auth_config):
    return AuthService(auth_config)


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = MagicMock()
    db.query = MagicMock(return_value=MockQuery())
    return db


@pytest.fixture
def client(auth_config, mock_db, monkeypatch):
    """TestClient using the test auth config and a mock database."""
    # Startup checks the signing key outside of dependency injection
    monkeypatch.setattr("vaad.main.get_auth_config", lambda: auth_config)

    def override_db():
        yield mock_db

    app.dependency_overrides[get_auth_config] = lambda: auth_config
    app.dependency_overrides[get_db] = override_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sqlite_db():
    """Real session on an in-memory SQLite database with all tables."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    db = sessionmaker(bind=engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def admin_client(client):
    """TestClient already logged in as admin."""
    response = client.post("/api/auth/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client

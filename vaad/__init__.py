"""
Va'ad Horim Portal Backend

This is the FastAPI backend for the parent-committee portal, providing
REST API endpoints for committee tasks, vendors and search, behind a
single shared admin login.

Packages:
- api: FastAPI routers and services
- auth: Admin login, session tokens and the request gate
- core: Configuration
- db: Database engine and session management
- models: SQLAlchemy ORM models
- cli: Command-line interface tools

Usage:
    # Run the API server
    uvicorn vaad.main:app --reload --port 8000

Environment Variables:
    DATABASE_URL: Database connection URL
    JWT_SECRET_KEY: Session token signing key (required)
    ADMIN_PASSWORD_HASH: bcrypt hash of the admin password
    LOG_LEVEL: Logging level (default: INFO)
"""

__version__ = "0.1.0"

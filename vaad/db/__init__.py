"""
Database Package

This package provides database connection and session management
using SQLAlchemy.

Modules:
- database: Database engine configuration and SessionLocal factory
- deps: Database session dependency for FastAPI

Usage:
    from vaad.db.database import SessionLocal

    with SessionLocal() as session:
        # perform database operations
        pass

Environment Variables:
    DATABASE_URL: SQLAlchemy database connection URL
"""

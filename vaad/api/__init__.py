"""
API Package

- routers: FastAPI routers for committee resources
- services: Business logic on top of the ORM models
"""

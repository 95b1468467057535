"""
API Routers

This package contains FastAPI routers that define the API endpoints.

Routers:
- health_router: Health check endpoint
- task_router: Committee tasks (mutations require admin)
- vendor_router: Vendor directory (mutations require admin)
- search_router: Cross-entity search
"""

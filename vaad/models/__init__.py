"""
ORM Models

Modules:
- models: Committee tasks and vendors
"""

from .models import Base, Task, Vendor

__all__ = ["Base", "Task", "Vendor"]

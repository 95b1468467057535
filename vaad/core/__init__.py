"""
Core Package

This package contains configuration for the portal backend.

Modules:
- settings: Application settings loaded from the environment and .env
"""

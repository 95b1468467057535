"""
Utilities

- logging_setup: Standard logging configuration for the API and CLI
"""

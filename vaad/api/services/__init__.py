"""
API Services

- task_service: Committee task management
- vendor_service: Vendor directory management
- search_service: Cross-entity search and ranking
- sql_utils: LIKE pattern escaping for user input
"""

# 📄 File: app/__init__.py

"""
User CRUD Service

A small HTTP service for creating, listing, reading, updating and deleting
users, backed by PostgreSQL.
"""

__version__ = "1.0.0"
__title__ = "User CRUD API"
__description__ = "User management CRUD service"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__", 
    "__description__",
    "__license__",
]

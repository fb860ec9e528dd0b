"""
Infrastructure layer package for the user service.
Provides database engine and session management.
"""

__all__ = []

# 📄 File: app/modules/user_management/infrastructure/memory/__init__.py
# 🧭 Purpose (Layman Explanation):
# Exposes the memory-only user store used by tests and local experiments
# 🧪 Purpose (Technical Summary):
# Package initialization exporting InMemoryUserRepository
# 🔗 Dependencies:
# in_memory_user_repository.py
# 🔄 Connected Modules / Calls From:
# tests/conftest.py

from .in_memory_user_repository import InMemoryUserRepository

__all__ = ["InMemoryUserRepository"]

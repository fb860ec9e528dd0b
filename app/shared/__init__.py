# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools
# that every part of the user service can use, like settings, logging and database access.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, infrastructure,
# and cross-cutting concerns used by the application modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Database infrastructure
- Exception hierarchy
- Logging utilities
"""

__all__ = []

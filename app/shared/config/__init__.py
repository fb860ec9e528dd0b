# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the user service how to connect to its database
# and adjust its behavior.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the settings model and its cached factory.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Infrastructure components

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Database connection configuration
- Logging and server options
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]

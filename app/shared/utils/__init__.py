# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up the helper tools other parts of the app use for logging.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package and re-exports the logging helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities

# 🔄 Connected Modules / Calls From:
# Used by: app.main, request logging middleware

"""
Shared Utilities Package

- Structured logging with JSON formatting
- Request-scoped logging context
"""

from .logging import get_logger, log_context, request_id_var, setup_logging

__all__ = [
    "get_logger",
    "log_context",
    "request_id_var",
    "setup_logging",
]

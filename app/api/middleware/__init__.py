# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the request "checkpoints" every call to the service passes through
# 🧪 Purpose (Technical Summary):
# Middleware package initialization exporting the request logging middleware
# 🔗 Dependencies:
# logging.py
# 🔄 Connected Modules / Calls From:
# app.main (middleware registration)

from .logging import RequestLoggingMiddleware

__all__ = [
    "RequestLoggingMiddleware",
]

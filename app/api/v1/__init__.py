# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation): 
# Organizes the service's public web endpoints: the users API and health checks
# 🧪 Purpose (Technical Summary): 
# Package initialization exporting the aggregated API router and the health router
# 🔗 Dependencies: 
# router.py, health.py
# 🔄 Connected Modules / Calls From: 
# app.main

from .health import health_router
from .router import api_router

__all__ = [
    "api_router",
    "health_router",
]

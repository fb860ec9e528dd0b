# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation): 
# This file acts like a traffic director, gathering the users endpoints into one place so the
# main application can mount them under the configured path.
# 🧪 Purpose (Technical Summary): 
# API router aggregation combining module routers for inclusion under settings.API_PREFIX.
# 🔗 Dependencies: 
# FastAPI, app.modules.user_management.presentation.api.v1.users
# 🔄 Connected Modules / Calls From: 
# app.main

import logging

from fastapi import APIRouter

from app.modules.user_management.presentation.api.v1.users import users_router

logger = logging.getLogger(__name__)

# Create main API router
api_router = APIRouter()

# User management routes
api_router.include_router(users_router)

# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation): 
# This file provides health check endpoints that tell us whether the user service is running
# and whether it can currently reach its database.
# 🧪 Purpose (Technical Summary): 
# Liveness and readiness endpoints for load balancers and orchestrators. Liveness never
# touches the database; readiness runs the connection manager's health check.
# 🔗 Dependencies: 
# FastAPI, app.shared.infrastructure.database.connection, app.shared.config.settings
# 🔄 Connected Modules / Calls From: 
# app.api.v1.router, app.main, monitoring systems, load balancers

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check as db_health_check

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()


@health_router.get("/health", 
                  summary="Basic Health Check",
                  description="Liveness probe, does not touch the database",
                  tags=["Health Check"])
async def health_check() -> JSONResponse:
    """
    Basic health check endpoint

    Returns simple OK status for quick health verification.
    """
    settings = get_settings()
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION
        }
    )


@health_router.get("/health/ready",
                  summary="Readiness Probe",
                  description="Reports whether the database is reachable",
                  tags=["Health Check"])
async def readiness_check() -> JSONResponse:
    """
    Readiness probe

    200 when the database answers, 503 otherwise.
    """
    db_health = await db_health_check()
    ready = db_health["status"] == "healthy"

    if not ready:
        logger.warning(f"Readiness check failed: {db_health.get('error')}")

    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "components": {"database": db_health}
        }
    )

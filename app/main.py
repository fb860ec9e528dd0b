# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts up the user service, connects all the different parts
# together, and makes sure everything is ready to handle requests.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with logging setup, middleware, router
# registration, exception handlers, and database initialization/shutdown in the lifespan.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database (connection, session)
# - app.api (routers, middleware)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - user-crud-api console script
# - tests (create_application)

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.v1.health import health_router
from app.api.v1.router import api_router
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import UserServiceException
from app.shared.infrastructure.database.connection import close_database, init_database
from app.shared.infrastructure.database.session import initialize_sessions
from app.shared.utils.logging import (
    log_shutdown_event,
    log_startup_event,
    request_id_var,
    setup_logging,
)

# Get application settings
settings = get_settings()

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Opens the database engine and session factory on startup and disposes
    the engine on shutdown.
    """
    log_startup_event(settings.APP_NAME, settings.APP_VERSION, {"environment": settings.ENVIRONMENT})

    try:
        await init_database()
        logger.info("✅ Database connection initialized")

        await initialize_sessions()
        logger.info("✅ Session manager initialized")

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise

    try:
        yield  # Application is running

    finally:
        try:
            await close_database()
            logger.info("✅ Database connections closed")
        except Exception as e:
            logger.error(f"❌ Shutdown error: {e}")

        log_shutdown_event(settings.APP_NAME)


def _request_id(request: Request):
    return getattr(request.state, "request_id", None) or request_id_var.get() or None


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with middleware,
    routers and exception handlers.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    # Request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    # Health check routes (no prefix)
    app.include_router(health_router)

    # User routes
    app.include_router(api_router, prefix=settings.API_PREFIX)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(UserServiceException)
    async def user_service_exception_handler(
        request: Request,
        exc: UserServiceException
    ) -> JSONResponse:
        """Handle application exceptions with the shared error envelope."""
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message}")

        content = exc.to_dict()
        content["error"]["timestamp"] = datetime.now(timezone.utc).isoformat()
        content["error"]["request_id"] = _request_id(request)

        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed bodies and path/query problems answer 400, not 422."""
        errors = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ())),
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "value_error"),
            }
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Invalid request",
                    "details": {"errors": errors},
                    "status_code": 400,
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "request_id": _request_id(request),
                }
            },
        )

    @app.exception_handler(Exception)
    async def internal_server_error_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """Handle unexpected errors."""
        logger.error(f"Internal server error: {exc}", exc_info=exc)

        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_SERVER_ERROR",
                    "message": "An internal server error occurred",
                    "details": {"error_type": type(exc).__name__} if settings.DEBUG else {},
                    "status_code": 500,
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "request_id": _request_id(request),
                }
            },
        )

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/health",
            "users": f"{settings.API_PREFIX}/users",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Run the application with uvicorn.

    Used by the ``user-crud-api`` console script and ``python -m app.main``.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()

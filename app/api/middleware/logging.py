# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation): 
# This file keeps a diary of every request made to the user service, recording what was asked for,
# how it was answered and how long it took, and tags each request with an id so its log lines can be found.
# 🧪 Purpose (Technical Summary): 
# Request logging middleware that assigns a correlation id, binds it to the request_id context
# variable for every log record emitted while the request runs, and logs method, path, status
# and duration with slow-request warnings.
# 🔗 Dependencies: 
# FastAPI/Starlette, logging, time, uuid, app.shared.utils.logging
# 🔄 Connected Modules / Calls From: 
# app.main (middleware registration), all API endpoints

import logging
import time
import uuid
from typing import Iterable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import log_context

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED_PATHS = ("/health", "/docs", "/redoc", "/openapi.json")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring

    Features:
    - Request id propagation (X-Request-ID in, X-Request-ID out)
    - Request/response timing (X-Response-Time)
    - Slow request warnings
    - Health/docs paths skipped from logs but still tagged
    """

    def __init__(
        self,
        app: ASGIApp,
        excluded_paths: Optional[Iterable[str]] = None,
        slow_request_threshold: float = 2.0,
    ):
        super().__init__(app)
        self.excluded_paths = tuple(excluded_paths or DEFAULT_EXCLUDED_PATHS)
        self.slow_request_threshold = slow_request_threshold
        self.request_id_header = "X-Request-ID"

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process and log HTTP requests/responses

        Args:
            request: HTTP request
            call_next: Next middleware or endpoint

        Returns:
            HTTP response
        """
        request_id = self._get_or_create_request_id(request)
        should_log = not request.url.path.startswith(self.excluded_paths)

        with log_context(request_id):
            start_time = time.perf_counter()

            if should_log:
                logger.info(
                    f"Request started: {request.method} {request.url.path}",
                    extra={"method": request.method, "path": request.url.path},
                )

            try:
                response = await call_next(request)
            except Exception as e:
                processing_time = time.perf_counter() - start_time
                logger.error(
                    f"Request failed: {request.method} {request.url.path} "
                    f"after {processing_time:.3f}s: {type(e).__name__}",
                    exc_info=True,
                )
                raise

            processing_time = time.perf_counter() - start_time

            if should_log:
                self._log_response(request, response.status_code, processing_time)

        response.headers[self.request_id_header] = request_id
        response.headers["X-Response-Time"] = f"{processing_time:.3f}s"
        return response

    def _get_or_create_request_id(self, request: Request) -> str:
        """
        Get existing request ID from the incoming header or create a new one
        """
        request_id = request.headers.get(self.request_id_header.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    def _log_response(self, request: Request, status_code: int, processing_time: float) -> None:
        extra = {
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round(processing_time * 1000, 2),
        }
        message = (
            f"Request completed: {request.method} {request.url.path} "
            f"{status_code} in {processing_time:.3f}s"
        )

        if status_code >= 500:
            logger.error(message, extra=extra)
        elif processing_time > self.slow_request_threshold:
            logger.warning(f"Slow request: {message}", extra=extra)
        elif status_code >= 400:
            logger.warning(message, extra=extra)
        else:
            logger.info(message, extra=extra)

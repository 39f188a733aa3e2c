"""FastAPI middleware for request tracing, logging and metrics"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from loan_gateway.config import settings
from loan_gateway.infrastructure.observability.metrics import request_duration_histogram

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add unique request ID to each request for distributed tracing"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log each request as it arrives"""

    async def dispatch(self, request: Request, call_next):
        # Root-path probes other than POST are noise
        is_root_probe = request.url.path == "/" and request.method.upper() != "POST"
        if settings.request_log_enabled and not is_root_probe:
            logger.info(
                f"{request.method} {request.url.path}",
                extra={"request_id": getattr(request.state, "request_id", "unknown")},
            )
        return await call_next(request)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record HTTP request metrics"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        duration = time.time() - start_time
        request_duration_histogram.labels(
            method=request.method,
            endpoint=request.url.path,
            status=response.status_code,
        ).observe(duration)

        return response

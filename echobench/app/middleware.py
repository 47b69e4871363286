"""
Middleware for request tracking and metrics.

This middleware:
- Assigns a correlation ID to each request
- Tracks request latency
- Logs all requests
- Counts requests by status code
"""
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from ..logging_config import get_logger, set_correlation_id
from .metrics import endpoint_label, http_request_duration_seconds, http_requests_total

logger = get_logger(__name__)


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """
    For each request:
    1. Take the correlation ID from X-Request-ID, or generate one
    2. Time the request
    3. Record metrics
    4. Log completion (or failure)
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get("X-Request-ID"))
        request.state.correlation_id = correlation_id

        endpoint = endpoint_label(request.url.path)
        start_time = time.perf_counter()

        logger.debug(
            "Request started",
            extra={
                "method": request.method,
                "path": request.url.path,
                "client": request.client.host if request.client else "unknown"
            }
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(
                "Request failed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "error": str(e),
                    "duration_ms": duration * 1000
                },
                exc_info=True
            )
            http_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                status=500
            ).inc()
            raise

        duration = time.perf_counter() - start_time
        http_requests_total.labels(
            method=request.method,
            endpoint=endpoint,
            status=response.status_code
        ).inc()
        http_request_duration_seconds.labels(
            method=request.method,
            endpoint=endpoint
        ).observe(duration)

        logger.info(
            "Request completed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration * 1000
            }
        )

        response.headers["X-Request-ID"] = correlation_id
        return response

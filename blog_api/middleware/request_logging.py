"""
Access logging for every HTTP request.

Logs method, path, status and duration. Request bodies and the
Authorization header are never logged: both may carry credentials.
"""
# Standard library imports
import logging
import time

# External package imports
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("blog_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request once the response is ready"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "-"
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f'{client_ip} "{request.method} {request.url.path}" 500 {duration_ms:.1f}ms'
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f'{client_ip} "{request.method} {request.url.path}" '
            f"{response.status_code} {duration_ms:.1f}ms"
        )
        return response

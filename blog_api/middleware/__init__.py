from .request_logging import RequestLoggingMiddleware
from .request_timeout import RequestTimeoutMiddleware

__all__ = ["RequestLoggingMiddleware", "RequestTimeoutMiddleware"]

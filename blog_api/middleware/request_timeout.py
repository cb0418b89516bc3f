# Standard library imports
import asyncio
import logging

# External package imports
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

# Local application imports
from ..core.exceptions import ServiceUnavailableError

logger = logging.getLogger(__name__)


class RequestTimeoutMiddleware:
    """
    Bound the time spent handling a single HTTP request.

    Plain ASGI middleware so the downstream app is cancelled directly when
    the deadline passes. If no response has started by then the client gets
    a 503; a response already in flight is left to fail on its own.
    """

    def __init__(self, app: ASGIApp, timeout_seconds: float) -> None:
        self.app = app
        self.timeout_seconds = timeout_seconds

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(
                self.app(scope, receive, send_wrapper),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Request {scope.get('method')} {scope.get('path')} timed out "
                f"after {self.timeout_seconds}s"
            )
            if response_started:
                raise
            response = JSONResponse(
                status_code=ServiceUnavailableError.status_code,
                content={"message": "Request timed out"},
            )
            await response(scope, receive, send)

# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import health_router, post_router, user_router
from .core.config import Settings, get_settings
from .core.exceptions import BlogApiError
from .core.logging_config import configure_logging
from .di.base_container import BaseContainer
from .di.container import DIContainer
from .infrastructure.db.mongo_connection import MongoConnection
from .middleware import RequestLoggingMiddleware, RequestTimeoutMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Connects to MongoDB before the server accepts requests and builds the
    DI container from that connection; closes the connection on shutdown.
    When a container was injected into create_application (tests), no
    connection is opened.
    """
    connection: Optional[MongoConnection] = None

    if app.state.container is None:
        connection = MongoConnection(app.state.settings)
        await connection.connect()
        app.state.container = DIContainer(connection)

    logger.info("Application startup complete")

    yield

    if connection is not None:
        connection.close()
        app.state.container = None

    logger.info("Application shutdown complete")


def _validation_message(exc: RequestValidationError) -> str:
    """Describe the first validation error, naming the offending field"""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    error = errors[0]
    error_type = error.get("type", "")
    location = [str(part) for part in error.get("loc", ()) if part != "body"]

    if error_type == "json_invalid":
        return "Malformed JSON body"
    if not location:
        return "Empty request body" if error_type == "missing" else "Invalid request body"

    field = ".".join(location)
    if error_type == "missing":
        return f"Missing `{field}` in request body"
    return f"Invalid `{field}` in request body"


def register_exception_handlers(application: FastAPI) -> None:
    """Render every error as JSON {"message": ...}"""

    @application.exception_handler(BlogApiError)
    async def handle_blog_api_error(request: Request, exc: BlogApiError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                f"{request.method} {request.url.path} failed: {exc.message}",
                exc_info=exc,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.public_message},
            headers=exc.headers,
        )

    @application.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # Unparseable JSON is raised while the body is read, before route
    # dependencies, so it reaches this handler ahead of the auth gate.
    @application.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _validation_message(exc)
        logger.info(f"{request.method} {request.url.path} rejected: {message}")
        return JSONResponse(status_code=400, content={"message": message})

    @application.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[BaseContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging, access log and request timeout middleware
    - Exception handlers
    - API route registration

    Args:
        settings: Settings to use (defaults to environment-based settings)
        container: Pre-built DI container; skips the MongoDB connection

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Blog API",
        version="1.0.0",
        description="Blog posts and user accounts with HTTP Basic authentication",
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.container = container

    # Last added runs first: the access log wraps the timeout
    application.add_middleware(
        RequestTimeoutMiddleware,
        timeout_seconds=settings.request_timeout_seconds,
    )
    application.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(application)

    application.include_router(health_router)
    application.include_router(user_router, prefix="/users")
    application.include_router(post_router, prefix="/posts")

    return application


def run() -> None:
    """Start the HTTP server on the configured host and port"""
    settings = get_settings()
    uvicorn.run(
        "blog_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# Create application instance
app = create_application()


if __name__ == "__main__":
    run()

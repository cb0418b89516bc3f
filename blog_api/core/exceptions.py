"""
Error taxonomy for the blog API.

Every error carries the HTTP status it maps to, so the exception handlers in
main.py can render any of them without a lookup table. Use cases raise these;
repositories translate driver errors into them.
"""
# Standard library imports
from typing import Dict, Optional


class BlogApiError(Exception):
    """Base class for all errors rendered as JSON ``{"message": ...}``"""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None

    @property
    def public_message(self) -> str:
        """Message safe to send to the client"""
        return self.message


class ValidationError(BlogApiError):
    """Malformed or missing request fields"""

    status_code = 400
    default_message = "Invalid request"


class AuthenticationError(BlogApiError):
    """Missing or incorrect credentials"""

    status_code = 401
    default_message = "Incorrect username or password"

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Basic"}


class NotFoundError(BlogApiError):
    """Referenced resource does not exist"""

    status_code = 404
    default_message = "Not Found"


class ConflictError(BlogApiError):
    """Resource already exists (duplicate username)"""

    status_code = 400
    default_message = "Resource already exists"


class UnexpectedError(BlogApiError):
    """Store or driver failure; details stay server-side"""

    status_code = 500
    default_message = "Internal server error"

    @property
    def public_message(self) -> str:
        return self.default_message


class ServiceUnavailableError(BlogApiError):
    """Transient backend failure (database unreachable, request timed out)"""

    status_code = 503
    default_message = "Service temporarily unavailable"

    @property
    def public_message(self) -> str:
        return self.default_message

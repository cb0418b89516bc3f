from .config import Settings, get_settings
from .exceptions import (
    BlogApiError,
    ValidationError,
    AuthenticationError,
    NotFoundError,
    ConflictError,
    UnexpectedError,
    ServiceUnavailableError,
)
from .security import HashingError, hash_password, verify_password

__all__ = [
    "Settings",
    "get_settings",
    "BlogApiError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "ConflictError",
    "UnexpectedError",
    "ServiceUnavailableError",
    "HashingError",
    "hash_password",
    "verify_password",
]

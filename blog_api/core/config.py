# Standard library imports
import os
from typing import Final, Optional


class Settings:
    """
    Runtime configuration for the blog API.

    Values come from the process environment (a .env file is loaded first by
    the app factory); every key has a local-development default.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "blog_api")
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
        )

        # HTTP server
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8080"))
        self.request_timeout_seconds: Final[float] = float(
            os.getenv("REQUEST_TIMEOUT_SECONDS", "10")
        )

        # Password hashing (bcrypt cost factor)
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Process-wide settings, built on first use
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Return the shared Settings, reading the environment on the first call
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

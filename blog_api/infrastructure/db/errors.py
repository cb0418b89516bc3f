# Standard library imports
import logging
from contextlib import contextmanager
from typing import Iterator

# External package imports
from pymongo.errors import ConnectionFailure, PyMongoError

# Local application imports
from ...core.exceptions import ServiceUnavailableError, UnexpectedError

logger = logging.getLogger(__name__)


@contextmanager
def translate_driver_errors(operation: str) -> Iterator[None]:
    """
    Map pymongo failures raised inside the block onto the API error taxonomy.

    ConnectionFailure (and its subclasses AutoReconnect,
    ServerSelectionTimeoutError, NetworkTimeout) becomes a 503; any other
    PyMongoError becomes a generic 500. The driver message is logged here and
    never reaches the client.
    """
    try:
        yield
    except ConnectionFailure as e:
        logger.error(f"Database unavailable during {operation}: {e}")
        raise ServiceUnavailableError(f"Database unavailable during {operation}") from e
    except PyMongoError as e:
        logger.error(f"Database error during {operation}: {e}", exc_info=True)
        raise UnexpectedError(f"Database error during {operation}") from e

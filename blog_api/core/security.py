# Standard library imports
from typing import Optional

# External package imports
import bcrypt

# Local application imports
from .config import get_settings

# bcrypt only reads the first 72 bytes of a password; longer input is cut
# there for both hashing and checking so over-long passwords keep working.
MAX_PASSWORD_BYTES = 72


class HashingError(Exception):
    """Raised when a password cannot be hashed"""


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plain password using bcrypt

    The generated salt is embedded in the returned string, so verification
    needs nothing but the hash itself.

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt cost factor (defaults to BCRYPT_ROUNDS setting)

    Returns:
        Hashed password string

    Raises:
        HashingError: If the password is missing, not a string, or rejected by bcrypt
    """
    if plain_password is None:
        raise HashingError("Password is required")
    if not isinstance(plain_password, str):
        raise HashingError("Password must be a string")

    if rounds is None:
        rounds = get_settings().bcrypt_rounds

    try:
        salt = bcrypt.gensalt(rounds=rounds)
        hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
    except ValueError as e:
        raise HashingError(f"Unable to hash password: {e}") from e
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    if not isinstance(plain_password, str) or not isinstance(hashed_password, str):
        return False
    try:
        return bcrypt.checkpw(
            _password_bytes(plain_password),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed stored hash
        return False

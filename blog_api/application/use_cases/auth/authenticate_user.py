# Standard library imports
import asyncio
import logging

# Local application imports
from ....core.exceptions import AuthenticationError
from ....core.security import verify_password
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Incorrect username or password"


class AuthenticateUserUseCase:
    """Use case for verifying HTTP Basic credentials against stored hashes"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_name: str, password: str) -> UserResponse:
        """
        Resolve the user and verify the password

        An unknown username and a wrong password raise the same error so
        callers cannot tell which usernames exist.

        Args:
            user_name: Username from the Authorization header
            password: Plain password from the Authorization header

        Returns:
            UserResponse for the authenticated user

        Raises:
            AuthenticationError: If the user does not exist or the password is wrong
        """
        user = await self.user_repository.find_by_username(user_name)
        if user is None:
            logger.info("Authentication failed: unknown user")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        # bcrypt is CPU-bound; keep it off the event loop
        valid = await asyncio.to_thread(verify_password, password, user.hashed_password)
        if not valid:
            logger.info("Authentication failed: password mismatch")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        return UserResponse(
            user_name=user.user_name,
            first_name=user.first_name,
            last_name=user.last_name,
        )

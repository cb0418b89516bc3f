# Standard library imports
import asyncio
import logging
from typing import Any

# Local application imports
from ....core.exceptions import ConflictError, ValidationError
from ....core.security import hash_password
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserFields
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)

UNPROCESSABLE = 422


def _unprocessable(message: str) -> ValidationError:
    return ValidationError(message, status_code=UNPROCESSABLE)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, payload: Any) -> UserResponse:
        """
        Validate the registration payload and create the user

        Checks run in a fixed order and the first failure wins. The
        count-then-insert uniqueness check is only a fast path: two
        concurrent registrations can both pass it, and the unique index on
        userName decides which insert succeeds.

        Args:
            payload: Decoded JSON request body

        Returns:
            UserResponse with created user information

        Raises:
            ValidationError: 400 for an empty body, 422 for field problems
            ConflictError: If the username is already taken
        """
        if not payload or not isinstance(payload, dict):
            raise ValidationError("Empty request body")

        if UserFields.USER_NAME not in payload:
            raise _unprocessable("Missing username")

        user_name = payload[UserFields.USER_NAME]
        if not isinstance(user_name, str):
            raise _unprocessable("Username must be a string")
        user_name = user_name.strip()
        if not user_name:
            raise _unprocessable("Username is nonexistent")

        password = payload.get(UserFields.PASSWORD)
        if not password:
            raise _unprocessable("Missing password")
        if not isinstance(password, str):
            raise _unprocessable("password must be a string")
        password = password.strip()
        if not password:
            raise _unprocessable("password is nonexistent")

        first_name = payload.get(UserFields.FIRST_NAME)
        last_name = payload.get(UserFields.LAST_NAME)
        for field, value in ((UserFields.FIRST_NAME, first_name), (UserFields.LAST_NAME, last_name)):
            if value is not None and not isinstance(value, str):
                raise _unprocessable(f"{field} must be a string")

        if await self.user_repository.count_by_username(user_name) > 0:
            raise ConflictError("This username already exists")

        hashed_password = await asyncio.to_thread(hash_password, password)

        new_user = User(
            id=None,  # Will be set by repository
            user_name=user_name,
            hashed_password=hashed_password,
            first_name=first_name,
            last_name=last_name,
        )

        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Registered user {saved_user.user_name} ({saved_user.id})")

        return UserResponse(
            user_name=saved_user.user_name,
            first_name=saved_user.first_name,
            last_name=saved_user.last_name,
        )

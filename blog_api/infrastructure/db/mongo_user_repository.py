# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.exceptions import ConflictError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .errors import translate_driver_errors


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection

    async def find_by_username(self, user_name: str) -> Optional[User]:
        """
        Find user by exact username

        Args:
            user_name: Username to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_name:
            return None

        with translate_driver_errors("find user"):
            document = await self.user_collection.find_one({UserFields.USER_NAME: user_name})
        if document is None:
            return None
        return self._document_to_user(document)

    async def count_by_username(self, user_name: str) -> int:
        with translate_driver_errors("count users"):
            return await self.user_collection.count_documents({UserFields.USER_NAME: user_name})

    async def create(self, user: User) -> User:
        """
        Insert a new user document

        Args:
            user: User domain model to insert (id is ignored)

        Returns:
            Saved User domain model with ID set

        Raises:
            ConflictError: If the unique userName index rejects the insert
        """
        user_dict = self._user_to_dict(user)
        with translate_driver_errors("create user"):
            try:
                result = await self.user_collection.insert_one(user_dict)
            except DuplicateKeyError as e:
                raise ConflictError("This username already exists") from e
        user.id = str(result.inserted_id)
        return user

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            user_name=document.get(UserFields.USER_NAME, ""),
            hashed_password=document.get(UserFields.PASSWORD, ""),
            first_name=document.get(UserFields.FIRST_NAME),
            last_name=document.get(UserFields.LAST_NAME),
        )

    def _user_to_dict(self, user: User) -> dict:
        user_dict = {
            UserFields.USER_NAME: user.user_name,
            UserFields.PASSWORD: user.hashed_password,
        }
        # Names stay absent rather than null when the client omitted them
        if user.first_name is not None:
            user_dict[UserFields.FIRST_NAME] = user.first_name
        if user.last_name is not None:
            user_dict[UserFields.LAST_NAME] = user.last_name
        return user_dict

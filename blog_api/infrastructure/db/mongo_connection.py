# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import Settings
from ...domain.constants import UserFields
from .errors import translate_driver_errors

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
POSTS_COLLECTION = "blogposts"


class MongoConnection:
    """
    Owns the Motor client for one application instance.

    Created by the app lifespan, connected before the server accepts
    requests and closed on shutdown. Nothing here is module-global, so tests
    and multiple app instances never share a client.
    """

    def __init__(self, settings: Settings, client: Optional[AsyncIOMotorClient] = None) -> None:
        self.settings = settings
        self._client = client
        self._database: Optional[AsyncIOMotorDatabase] = None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise RuntimeError("MongoConnection.connect() has not been called")
        return self._database

    async def connect(self) -> AsyncIOMotorDatabase:
        """
        Open the client, verify the server answers, and ensure indexes.

        Returns:
            The connected database

        Raises:
            ServiceUnavailableError: If MongoDB cannot be reached
        """
        if self._client is None:
            self._client = AsyncIOMotorClient(
                self.settings.mongo_uri,
                serverSelectionTimeoutMS=self.settings.mongo_server_selection_timeout_ms,
                tz_aware=True,
            )
        self._database = self._client[self.settings.mongo_database_name]

        with translate_driver_errors("connect"):
            await self._client.admin.command("ping")
            await self.ensure_indexes()

        logger.info(f"Connected to MongoDB database '{self.settings.mongo_database_name}'")
        return self._database

    async def ensure_indexes(self) -> None:
        """The unique userName index is the authority on duplicate usernames"""
        await self.get_user_collection().create_index(
            [(UserFields.USER_NAME, ASCENDING)],
            unique=True,
            name="userName_unique",
        )

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._database = None

    def get_user_collection(self) -> AsyncIOMotorCollection:
        """
        Get users collection from MongoDB

        Returns:
            MongoDB collection for users
        """
        return self.database[USERS_COLLECTION]

    def get_post_collection(self) -> AsyncIOMotorCollection:
        """
        Get blog posts collection from MongoDB

        Returns:
            MongoDB collection for blog posts
        """
        return self.database[POSTS_COLLECTION]

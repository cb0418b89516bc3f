from .mongo_connection import MongoConnection, USERS_COLLECTION, POSTS_COLLECTION
from .mongo_user_repository import MongoUserRepository
from .mongo_post_repository import MongoPostRepository

__all__ = [
    "MongoConnection",
    "USERS_COLLECTION",
    "POSTS_COLLECTION",
    "MongoUserRepository",
    "MongoPostRepository",
]

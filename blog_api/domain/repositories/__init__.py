from .user_repository import UserRepository
from .post_repository import PostRepository

__all__ = ["UserRepository", "PostRepository"]

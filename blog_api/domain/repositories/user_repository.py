from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_username(self, user_name: str) -> Optional[User]:
        """Find user by exact username"""
        pass

    @abstractmethod
    async def count_by_username(self, user_name: str) -> int:
        """Count users with the given username"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Persist a new user and return it with its ID set.

        Raises ConflictError when the username is already taken.
        """
        pass

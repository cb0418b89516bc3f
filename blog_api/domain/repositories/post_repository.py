from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.post import Post


class PostRepository(ABC):
    """Repository interface - defines contract for blog post data access"""

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Persist a new post; the store assigns id and created"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Return every post"""
        pass

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID; None when missing or the ID is malformed"""
        pass

    @abstractmethod
    async def update_by_id(self, post_id: str, changes: Dict[str, Any]) -> Optional[Post]:
        """
        Apply `changes` (keys from PostFields.UPDATABLE) and return the
        updated post, or None when no post has that ID.
        """
        pass

    @abstractmethod
    async def delete_by_id(self, post_id: str) -> bool:
        """Delete post by ID; True if a document was removed"""
        pass

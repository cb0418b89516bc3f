# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting a post; deleting a missing post is not an error"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str) -> None:
        deleted = await self.post_repository.delete_by_id(post_id)
        if deleted:
            logger.info(f"Deleted blog post with id `{post_id}`")
        else:
            logger.info(f"Delete requested for missing post `{post_id}`")

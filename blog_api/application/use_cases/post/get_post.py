# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse
from .mappers import to_post_response


class GetPostUseCase:
    """Use case for getting a post by ID"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str) -> PostResponse:
        """
        Get a post by ID

        Args:
            post_id: ID of the post

        Returns:
            PostResponse with post information

        Raises:
            NotFoundError: If no post has this ID
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError(f"Post {post_id} not found")
        return to_post_response(post)

# Standard library imports
import logging

# Local application imports
from ....core.exceptions import ValidationError
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Post
from ...dto.post_dto import PostCreateRequest, PostResponse
from .mappers import to_author, to_post_response

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for creating a blog post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, request: PostCreateRequest) -> PostResponse:
        """
        Create a new post

        Args:
            request: Validated creation request (title and content present)

        Returns:
            PostResponse for the stored post

        Raises:
            ValidationError: If the title is only whitespace
        """
        if not request.title.strip():
            raise ValidationError("Invalid `title` in request body")

        new_post = Post(
            id=None,  # Will be set by repository
            title=request.title,
            content=request.content,
            author=to_author(request.author),
        )

        saved_post = await self.post_repository.create(new_post)
        logger.info(f"Created post {saved_post.id}")
        return to_post_response(saved_post)

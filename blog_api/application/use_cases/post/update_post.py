# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....core.exceptions import NotFoundError, ValidationError
from ....domain.repositories.post_repository import PostRepository
from ....domain.constants import PostFields
from ...dto.post_dto import PostUpdateRequest, PostResponse
from .mappers import to_author, to_post_response

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Use case for partially updating a post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, request: PostUpdateRequest) -> PostResponse:
        """
        Apply the whitelisted fields present in the request

        Args:
            post_id: ID from the request path
            request: Update request; `id` must equal `post_id`

        Returns:
            PostResponse for the updated post

        Raises:
            ValidationError: If the IDs differ or a sent title is blank
            NotFoundError: If no post has this ID
        """
        if not post_id or not request.id or request.id != post_id:
            logger.warning(
                f"Rejected update: path id {post_id!r} does not match body id {request.id!r}"
            )
            raise ValidationError("Request path id and request body id values must match")

        sent = request.model_fields_set
        changes: Dict[str, Any] = {}
        if PostFields.TITLE in sent:
            if not request.title or not request.title.strip():
                raise ValidationError("Invalid `title` in request body")
            changes[PostFields.TITLE] = request.title
        if PostFields.CONTENT in sent:
            changes[PostFields.CONTENT] = request.content
        if PostFields.AUTHOR in sent:
            changes[PostFields.AUTHOR] = to_author(request.author)

        updated_post = await self.post_repository.update_by_id(post_id, changes)
        if updated_post is None:
            raise NotFoundError(f"Post {post_id} not found")

        logger.info(f"Updated post {post_id} fields {sorted(changes)}")
        return to_post_response(updated_post)

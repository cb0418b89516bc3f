# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse
from .mappers import to_post_response


class ListPostsUseCase:
    """Use case for listing every post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self) -> List[PostResponse]:
        posts = await self.post_repository.find_all()
        return [to_post_response(post) for post in posts]

# Standard library imports
from typing import Optional

# Local application imports
from ....domain.models.post import Author, Post
from ....utils.datetime_utils import to_iso
from ...dto.post_dto import AuthorPayload, PostResponse


def to_post_response(post: Post) -> PostResponse:
    """Public representation of a post"""
    return PostResponse(
        id=post.id or "",
        author=post.author_name,
        content=post.content,
        title=post.title,
        created=to_iso(post.created),
    )


def to_author(payload: Optional[AuthorPayload]) -> Optional[Author]:
    if payload is None:
        return None
    return Author(first_name=payload.first_name, last_name=payload.last_name)

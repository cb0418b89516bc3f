from .user_dto import UserResponse
from .post_dto import (
    AuthorPayload,
    PostCreateRequest,
    PostUpdateRequest,
    PostResponse,
)

__all__ = [
    "UserResponse",
    "AuthorPayload",
    "PostCreateRequest",
    "PostUpdateRequest",
    "PostResponse",
]

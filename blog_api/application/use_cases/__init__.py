from .auth import (
    AuthenticateUserUseCase,
    RegisterUserUseCase,
)
from .post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)

__all__ = [
    "AuthenticateUserUseCase",
    "RegisterUserUseCase",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
]

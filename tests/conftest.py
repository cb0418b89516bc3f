"""
Shared pytest fixtures for blog API tests.

API tests run the real FastAPI app against in-memory repositories injected
through the DI container, so no MongoDB server is needed.
"""
import copy
import dataclasses
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from blog_api.core.config import Settings
from blog_api.core.exceptions import ConflictError
from blog_api.core.security import hash_password
from blog_api.di.base_container import BaseContainer
from blog_api.di.container import register_use_cases
from blog_api.domain.constants import PostFields
from blog_api.domain.models.post import Author, Post
from blog_api.domain.models.user import User
from blog_api.domain.repositories.post_repository import PostRepository
from blog_api.domain.repositories.user_repository import UserRepository
from blog_api.main import create_application
from blog_api.utils.datetime_utils import utc_now


TEST_USER_NAME = "jdoe"
TEST_PASSWORD = "baseball"


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by a dict, enforcing unique usernames like the Mongo index"""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    def add(self, user: User) -> User:
        if user.user_name in self.users:
            raise ConflictError("This username already exists")
        stored = dataclasses.replace(user, id=user.id or str(ObjectId()))
        self.users[stored.user_name] = stored
        return copy.deepcopy(stored)

    async def find_by_username(self, user_name: str) -> Optional[User]:
        user = self.users.get(user_name)
        return copy.deepcopy(user) if user else None

    async def count_by_username(self, user_name: str) -> int:
        return 1 if user_name in self.users else 0

    async def create(self, user: User) -> User:
        return self.add(user)


class InMemoryPostRepository(PostRepository):
    """PostRepository backed by a dict keyed by ObjectId strings"""

    def __init__(self) -> None:
        self.posts: Dict[str, Post] = {}

    def add(self, post: Post) -> Post:
        stored = dataclasses.replace(
            post,
            id=str(ObjectId()),
            created=post.created or utc_now(),
        )
        self.posts[stored.id] = stored
        return copy.deepcopy(stored)

    async def create(self, post: Post) -> Post:
        return self.add(dataclasses.replace(post, created=None))

    async def find_all(self) -> List[Post]:
        return [copy.deepcopy(post) for post in self.posts.values()]

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        post = self.posts.get(post_id)
        return copy.deepcopy(post) if post else None

    async def update_by_id(self, post_id: str, changes: Dict[str, Any]) -> Optional[Post]:
        post = self.posts.get(post_id)
        if post is None:
            return None
        allowed = {field: value for field, value in changes.items() if field in PostFields.UPDATABLE}
        updated = dataclasses.replace(post, **allowed)
        self.posts[post_id] = updated
        return copy.deepcopy(updated)

    async def delete_by_id(self, post_id: str) -> bool:
        return self.posts.pop(post_id, None) is not None


def make_settings(**overrides: Any) -> Settings:
    """Settings from the environment with selected attributes replaced"""
    settings = Settings()
    for name, value in overrides.items():
        setattr(settings, name, value)
    return settings


def make_post(title: str = "First post", content: str = "Hello", first: str = "Ada", last: str = "Lovelace") -> Post:
    return Post(id=None, title=title, content=content, author=Author(first_name=first, last_name=last))


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def post_repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def seeded_user(user_repository) -> User:
    """A stored user whose password is TEST_PASSWORD"""
    return user_repository.add(
        User(
            id=None,
            user_name=TEST_USER_NAME,
            hashed_password=hash_password(TEST_PASSWORD),
            first_name="John",
            last_name="Doe",
        )
    )


@pytest.fixture
def auth(seeded_user):
    """httpx auth tuple for the seeded user"""
    return (TEST_USER_NAME, TEST_PASSWORD)


@pytest.fixture
def seeded_posts(post_repository) -> List[Post]:
    return [
        post_repository.add(make_post(title=f"Post {i}", content=f"Body {i}"))
        for i in range(1, 4)
    ]


@pytest.fixture
def container(user_repository, post_repository) -> BaseContainer:
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(PostRepository, post_repository)
    register_use_cases(container)
    return container


@pytest.fixture
def client(container):
    """Test client running the full app against the in-memory container."""
    app = create_application(container=container)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def build_client(container):
    """Factory for clients whose settings differ from the environment defaults."""
    def _build(**settings_overrides: Any) -> TestClient:
        app = create_application(settings=make_settings(**settings_overrides), container=container)
        return TestClient(app)
    return _build

"""
Unit tests for the MongoDB repositories, with Motor collections mocked.
"""
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import AutoReconnect, DuplicateKeyError, OperationFailure

from blog_api.core.exceptions import ConflictError, ServiceUnavailableError, UnexpectedError
from blog_api.domain.models.post import Author, Post
from blog_api.domain.models.user import User
from blog_api.infrastructure.db.mongo_post_repository import MongoPostRepository
from blog_api.infrastructure.db.mongo_user_repository import MongoUserRepository

POST_ID = ObjectId()


def _post_document(**overrides):
    document = {
        "_id": POST_ID,
        "title": "Hello",
        "content": "Body",
        "author": {"firstName": "Ada", "lastName": "Lovelace"},
        "created": datetime(2025, 1, 1, 12, 0, 0),
    }
    document.update(overrides)
    return document


class TestMongoUserRepository:
    """Tests for MongoUserRepository"""

    @pytest.mark.asyncio
    async def test_find_by_username_maps_document(self):
        collection = AsyncMock()
        collection.find_one.return_value = {
            "_id": ObjectId(),
            "userName": "jdoe",
            "password": "$2b$10$hash",
            "firstName": "John",
        }
        user = await MongoUserRepository(collection).find_by_username("jdoe")

        collection.find_one.assert_awaited_once_with({"userName": "jdoe"})
        assert user.user_name == "jdoe"
        assert user.hashed_password == "$2b$10$hash"
        assert user.first_name == "John"
        assert user.last_name is None

    @pytest.mark.asyncio
    async def test_find_by_username_missing(self):
        collection = AsyncMock()
        collection.find_one.return_value = None
        assert await MongoUserRepository(collection).find_by_username("ghost") is None

    @pytest.mark.asyncio
    async def test_count_by_username(self):
        collection = AsyncMock()
        collection.count_documents.return_value = 1
        assert await MongoUserRepository(collection).count_by_username("jdoe") == 1
        collection.count_documents.assert_awaited_once_with({"userName": "jdoe"})

    @pytest.mark.asyncio
    async def test_create_omits_absent_names(self):
        collection = AsyncMock()
        inserted_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)

        saved = await MongoUserRepository(collection).create(
            User(id=None, user_name="abc", hashed_password="$2b$10$hash")
        )

        collection.insert_one.assert_awaited_once_with({"userName": "abc", "password": "$2b$10$hash"})
        assert saved.id == str(inserted_id)

    @pytest.mark.asyncio
    async def test_duplicate_key_becomes_conflict(self):
        collection = AsyncMock()
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        with pytest.raises(ConflictError):
            await MongoUserRepository(collection).create(
                User(id=None, user_name="abc", hashed_password="hash")
            )

    @pytest.mark.asyncio
    async def test_connection_failure_becomes_unavailable(self):
        collection = AsyncMock()
        collection.find_one.side_effect = AutoReconnect("connection reset")
        with pytest.raises(ServiceUnavailableError):
            await MongoUserRepository(collection).find_by_username("jdoe")


class TestMongoPostRepository:
    """Tests for MongoPostRepository"""

    @pytest.mark.asyncio
    async def test_create_sets_id_and_created(self):
        collection = AsyncMock()
        collection.insert_one.return_value = MagicMock(inserted_id=POST_ID)
        post = Post(id=None, title="Hello", content="Body", author=Author("Ada", "Lovelace"))

        saved = await MongoPostRepository(collection).create(post)

        stored = collection.insert_one.await_args.args[0]
        assert stored["author"] == {"firstName": "Ada", "lastName": "Lovelace"}
        assert isinstance(stored["created"], datetime)
        assert saved.id == str(POST_ID)
        assert saved.created == stored["created"]

    @pytest.mark.asyncio
    async def test_find_all(self):
        cursor = MagicMock()
        cursor.to_list = AsyncMock(return_value=[_post_document(), _post_document(author=None)])
        collection = MagicMock()
        collection.find.return_value = cursor

        posts = await MongoPostRepository(collection).find_all()

        assert len(posts) == 2
        assert posts[0].author_name == "Ada Lovelace"
        assert posts[1].author is None
        assert posts[0].created.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_by_id_malformed_id_skips_query(self):
        collection = AsyncMock()
        assert await MongoPostRepository(collection).find_by_id("not-an-object-id") is None
        collection.find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_find_by_id_found(self):
        collection = AsyncMock()
        collection.find_one.return_value = _post_document()
        post = await MongoPostRepository(collection).find_by_id(str(POST_ID))
        collection.find_one.assert_awaited_once_with({"_id": POST_ID})
        assert post.id == str(POST_ID)

    @pytest.mark.asyncio
    async def test_update_sets_only_whitelisted_fields(self):
        collection = AsyncMock()
        collection.find_one_and_update.return_value = _post_document(title="New")
        repo = MongoPostRepository(collection)

        post = await repo.update_by_id(
            str(POST_ID),
            {"title": "New", "author": Author("Grace", "Hopper"), "created": "ignored"},
        )

        collection.find_one_and_update.assert_awaited_once_with(
            {"_id": POST_ID},
            {"$set": {"title": "New", "author": {"firstName": "Grace", "lastName": "Hopper"}}},
            return_document=ReturnDocument.AFTER,
        )
        assert post.title == "New"

    @pytest.mark.asyncio
    async def test_update_missing_post(self):
        collection = AsyncMock()
        collection.find_one_and_update.return_value = None
        assert await MongoPostRepository(collection).update_by_id(str(POST_ID), {"title": "x"}) is None

    @pytest.mark.asyncio
    async def test_delete_reports_whether_removed(self):
        collection = AsyncMock()
        collection.delete_one.return_value = MagicMock(deleted_count=0)
        assert await MongoPostRepository(collection).delete_by_id(str(POST_ID)) is False

    @pytest.mark.asyncio
    async def test_delete_malformed_id(self):
        collection = AsyncMock()
        assert await MongoPostRepository(collection).delete_by_id("zzz") is False
        collection.delete_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_operation_failure_becomes_unexpected(self):
        collection = AsyncMock()
        collection.delete_one.side_effect = OperationFailure("not authorized")
        with pytest.raises(UnexpectedError) as exc_info:
            await MongoPostRepository(collection).delete_by_id(str(POST_ID))
        assert exc_info.value.public_message == "Internal server error"

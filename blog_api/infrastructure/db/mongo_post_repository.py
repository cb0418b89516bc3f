# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Author, Post
from ...domain.constants import PostFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .errors import translate_driver_errors


def _to_object_id(post_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(post_id)
    except (InvalidId, TypeError):
        return None


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""

    def __init__(self, post_collection: AsyncIOMotorCollection) -> None:
        self.post_collection = post_collection

    async def create(self, post: Post) -> Post:
        """
        Insert a new post document

        Args:
            post: Post domain model (id and created are assigned here)

        Returns:
            Saved Post domain model with id and created set
        """
        post_dict = self._post_to_dict(post)
        post_dict[PostFields.CREATED] = utc_now()

        with translate_driver_errors("create post"):
            result = await self.post_collection.insert_one(post_dict)

        post.id = str(result.inserted_id)
        post.created = post_dict[PostFields.CREATED]
        return post

    async def find_all(self) -> List[Post]:
        with translate_driver_errors("list posts"):
            documents = await self.post_collection.find({}).to_list(length=None)
        return [self._document_to_post(document) for document in documents]

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """
        Find post by ID

        Args:
            post_id: Post ID to search for

        Returns:
            Post domain model if found, None otherwise (including malformed IDs)
        """
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        with translate_driver_errors("find post"):
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        if document is None:
            return None
        return self._document_to_post(document)

    async def update_by_id(self, post_id: str, changes: Dict[str, Any]) -> Optional[Post]:
        """
        Apply a partial update and return the post as stored afterwards

        Args:
            post_id: ID of the post to update
            changes: Mapping of updatable field -> new value; author values
                are Author instances or None

        Returns:
            Updated Post, or None if no post has this ID
        """
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        update_set = {
            field: self._author_to_dict(value) if field == PostFields.AUTHOR else value
            for field, value in changes.items()
            if field in PostFields.UPDATABLE
        }

        with translate_driver_errors("update post"):
            if not update_set:
                document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
            else:
                document = await self.post_collection.find_one_and_update(
                    {PostFields.MONGO_ID: object_id},
                    {"$set": update_set},
                    return_document=ReturnDocument.AFTER,
                )
        if document is None:
            return None
        return self._document_to_post(document)

    async def delete_by_id(self, post_id: str) -> bool:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return False

        with translate_driver_errors("delete post"):
            result = await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
        return result.deleted_count > 0

    def _document_to_post(self, document: dict) -> Post:
        """
        Convert MongoDB document to Post domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Post domain model
        """
        if not document or PostFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        author_doc = document.get(PostFields.AUTHOR)
        author = None
        if isinstance(author_doc, dict):
            author = Author(
                first_name=author_doc.get(PostFields.AUTHOR_FIRST_NAME),
                last_name=author_doc.get(PostFields.AUTHOR_LAST_NAME),
            )

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            title=document.get(PostFields.TITLE, ""),
            content=document.get(PostFields.CONTENT),
            author=author,
            created=ensure_utc(document.get(PostFields.CREATED)),
        )

    def _post_to_dict(self, post: Post) -> dict:
        post_dict = {
            PostFields.TITLE: post.title,
            PostFields.CONTENT: post.content,
        }
        if post.author is not None:
            post_dict[PostFields.AUTHOR] = self._author_to_dict(post.author)
        return post_dict

    @staticmethod
    def _author_to_dict(author: Optional[Author]) -> Optional[dict]:
        if author is None:
            return None
        return {
            PostFields.AUTHOR_FIRST_NAME: author.first_name,
            PostFields.AUTHOR_LAST_NAME: author.last_name,
        }

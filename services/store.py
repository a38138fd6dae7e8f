import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import pymongo.errors
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING

from models.post import Post
from services.errors import PostNotFound, StoreUnavailable

logger = logging.getLogger(__name__)


class PostStore(ABC):
    """Persistence operations the post rules depend on"""

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """All posts, newest first"""

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """The post with this id, or None"""

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post or replace an existing one; returns the stored post"""

    @abstractmethod
    async def remove(self, post: Post) -> None:
        """Delete the post"""


def to_object_id(id_str: str) -> Optional[ObjectId]:
    try:
        return ObjectId(id_str)
    except (InvalidId, TypeError):
        return None


class MongoPostStore(PostStore):
    """PostStore over a Motor database, one document per post"""

    def __init__(self, db, collection_name: str = "posts"):
        self.collection = db[collection_name]

    async def ensure_indexes(self):
        await self.collection.create_index([("date", DESCENDING)])

    async def find_all(self) -> List[Post]:
        try:
            docs = await self.collection.find({}, sort=[("date", DESCENDING)]).to_list(length=None)
        except pymongo.errors.PyMongoError as e:
            logger.error("Listing posts failed: %s", e)
            raise StoreUnavailable() from e
        return [Post.from_document(doc) for doc in docs]

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        oid = to_object_id(post_id)
        if oid is None:
            return None
        try:
            doc = await self.collection.find_one({"_id": oid})
        except pymongo.errors.PyMongoError as e:
            logger.error("Loading post %s failed: %s", post_id, e)
            raise StoreUnavailable() from e
        if not doc:
            return None
        return Post.from_document(doc)

    async def save(self, post: Post) -> Post:
        doc = post.to_document()
        try:
            if post.id is None:
                result = await self.collection.insert_one(doc)
                return post.model_copy(update={"id": str(result.inserted_id)})

            result = await self.collection.replace_one({"_id": ObjectId(post.id)}, doc)
        except pymongo.errors.PyMongoError as e:
            logger.error("Saving post %s failed: %s", post.id, e)
            raise StoreUnavailable() from e

        if result.matched_count == 0:
            raise PostNotFound()
        return post

    async def remove(self, post: Post) -> None:
        oid = to_object_id(post.id)
        if oid is None:
            raise PostNotFound()
        try:
            await self.collection.delete_one({"_id": oid})
        except pymongo.errors.PyMongoError as e:
            logger.error("Deleting post %s failed: %s", post.id, e)
            raise StoreUnavailable() from e

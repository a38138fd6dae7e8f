import logging
from typing import Any, Callable, List, Optional, TypeVar

from models.post import Comment, Like, Post
from services.errors import (
    AlreadyLiked,
    CommentNotFound,
    NotAuthorized,
    NotLiked,
    PostNotFound,
    ValidationFailed,
)
from services.store import PostStore
from utils.validation import validate_post_input

logger = logging.getLogger(__name__)

T = TypeVar("T")


def remove_first(items: List[T], predicate: Callable[[T], bool]) -> Optional[List[T]]:
    """Copy of items without the first match, or None if nothing matches"""
    for index, item in enumerate(items):
        if predicate(item):
            return items[:index] + items[index + 1:]
    return None


class PostService:
    """
    Rules for creating, deleting, liking and commenting on posts.

    Every operation is a single read-modify-write against the store. There is
    no version check, so two concurrent writers on the same post can lose an
    update.
    """

    def __init__(self, store: PostStore):
        self.store = store

    async def _load(self, post_id: str, **not_found: Any) -> Post:
        post = await self.store.find_by_id(post_id)
        if post is None:
            raise PostNotFound(**not_found)
        return post

    ##########
    # Reads
    ##########
    async def list_posts(self) -> List[Post]:
        return await self.store.find_all()

    async def get_post(self, post_id: str) -> Post:
        return await self._load(post_id, key="nopostfound", message="No post found with that ID")

    ##########
    # Posts
    ##########
    async def create_post(self, user_id: str, text: Optional[str], name: Optional[str] = None,
                          avatar: Optional[str] = None, **extra: Any) -> Post:
        """Validate and store a new post with no likes or comments"""
        errors, is_valid = validate_post_input({"text": text, **extra})
        if not is_valid:
            raise ValidationFailed(errors)

        post = await self.store.save(Post(user=user_id, text=text, name=name, avatar=avatar))
        logger.info("User %s created post %s", user_id, post.id)
        return post

    async def delete_post(self, user_id: str, post_id: str) -> None:
        """Remove a post; only its author may do this"""
        post = await self._load(post_id)

        # Check for post owner
        if post.user != user_id:
            logger.warning("User %s tried to delete post %s owned by %s", user_id, post_id, post.user)
            raise NotAuthorized()

        await self.store.remove(post)
        logger.info("User %s deleted post %s", user_id, post_id)

    ##########
    # Likes
    ##########
    async def like_post(self, user_id: str, post_id: str) -> Post:
        post = await self._load(post_id)
        if post.liked_by(user_id):
            raise AlreadyLiked()

        post.likes = [Like(user=user_id)] + post.likes
        post = await self.store.save(post)
        logger.info("User %s liked post %s", user_id, post_id)
        return post

    async def unlike_post(self, user_id: str, post_id: str) -> Post:
        post = await self._load(post_id)
        likes = remove_first(post.likes, lambda like: like.user == user_id)
        if likes is None:
            raise NotLiked()

        post.likes = likes
        post = await self.store.save(post)
        logger.info("User %s unliked post %s", user_id, post_id)
        return post

    ##########
    # Comments
    ##########
    async def add_comment(self, user_id: str, post_id: str, text: Optional[str],
                          name: Optional[str] = None, avatar: Optional[str] = None,
                          **extra: Any) -> Post:
        """Validate and prepend a comment; newest comments come first"""
        errors, is_valid = validate_post_input({"text": text, **extra})
        if not is_valid:
            raise ValidationFailed(errors)

        post = await self._load(post_id)
        comment = Comment(user=user_id, text=text, name=name, avatar=avatar)
        post.comments = [comment] + post.comments
        post = await self.store.save(post)
        logger.info("User %s commented %s on post %s", user_id, comment.id, post_id)
        return post

    async def delete_comment(self, post_id: str, comment_id: str) -> Post:
        """
        Remove a comment by id.

        Any authenticated caller may remove any comment; comment authorship
        is not checked here.
        """
        post = await self._load(post_id)
        comments = remove_first(post.comments, lambda comment: comment.id == comment_id)
        if comments is None:
            raise CommentNotFound()

        post.comments = comments
        post = await self.store.save(post)
        logger.info("Deleted comment %s from post %s", comment_id, post_id)
        return post

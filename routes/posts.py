from typing import Dict, List

from fastapi import APIRouter

from dependencies import CurrentUserDep, Posts
from models.post import Post, PostInput

router = APIRouter()


@router.get("/test")
async def test_posts():
    """Tests posts route"""
    return {"msg": "Posts Works"}


@router.get("", response_model=List[Post])
@router.get("/", response_model=List[Post], include_in_schema=False)
async def get_posts(posts: Posts):
    """Get all posts, newest first"""
    return await posts.list_posts()


@router.get("/{post_id}", response_model=Post)
async def get_post(post_id: str, posts: Posts):
    """Get post by id"""
    return await posts.get_post(post_id)


@router.delete("/{post_id}")
async def delete_post(post_id: str, posts: Posts, current_user: CurrentUserDep) -> Dict[str, bool]:
    """Delete a post owned by the current user"""
    await posts.delete_post(current_user.id, post_id)
    return {"success": True}


@router.post("/like/{post_id}", response_model=Post)
async def like_post(post_id: str, posts: Posts, current_user: CurrentUserDep):
    return await posts.like_post(current_user.id, post_id)


@router.post("/unlike/{post_id}", response_model=Post)
async def unlike_post(post_id: str, posts: Posts, current_user: CurrentUserDep):
    return await posts.unlike_post(current_user.id, post_id)


@router.post("", response_model=Post)
@router.post("/", response_model=Post, include_in_schema=False)
async def create_post(payload: PostInput, posts: Posts, current_user: CurrentUserDep):
    """Create post; name and avatar default to the token's profile"""
    return await posts.create_post(
        current_user.id,
        payload.text,
        name=payload.name or current_user.name,
        avatar=payload.avatar or current_user.avatar,
        **payload.model_dump(include={"email", "password"}, exclude_none=True),
    )


@router.post("/comment/{post_id}", response_model=Post)
async def add_comment(post_id: str, payload: PostInput, posts: Posts, current_user: CurrentUserDep):
    """Add comment to post"""
    return await posts.add_comment(
        current_user.id,
        post_id,
        payload.text,
        name=payload.name or current_user.name,
        avatar=payload.avatar or current_user.avatar,
        **payload.model_dump(include={"email", "password"}, exclude_none=True),
    )


@router.delete("/comment/{post_id}/{comment_id}", response_model=Post)
async def delete_comment(post_id: str, comment_id: str, posts: Posts, current_user: CurrentUserDep):
    """Delete comment from post"""
    return await posts.delete_comment(post_id, comment_id)

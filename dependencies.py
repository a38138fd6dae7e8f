from typing import Annotated

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from motor.motor_asyncio import AsyncIOMotorDatabase

from models.user import CurrentUser
from services.auth import verify_token
from services.posts import PostService
from services.store import PostStore

# HTTP Bearer token dependency
security = HTTPBearer(auto_error=False)


async def get_db(request: Request) -> AsyncIOMotorDatabase:
    """Get Motor database from app state"""
    return request.app.state.db


async def get_post_store(request: Request) -> PostStore:
    """Get post store from app state"""
    return request.app.state.post_store


async def get_post_service(store: PostStore = Depends(get_post_store)) -> PostService:
    return PostService(store)


async def get_current_user_required(
        credentials: HTTPAuthorizationCredentials = Depends(security)
) -> CurrentUser:
    """Return current user from the bearer token or raise 401"""
    payload = verify_token(credentials.credentials) if credentials else None
    if not payload or not payload.get("user_id"):
        raise HTTPException(status_code=401, detail="Authentication required")

    return CurrentUser(
        id=payload["user_id"],
        name=payload.get("name"),
        avatar=payload.get("avatar"),
    )


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user_required)]
Posts = Annotated[PostService, Depends(get_post_service)]
Database = Annotated[AsyncIOMotorDatabase, Depends(get_db)]

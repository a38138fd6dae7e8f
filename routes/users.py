import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pymongo.errors import DuplicateKeyError

from dependencies import CurrentUserDep, Database
from models.user import UserCreate, UserLogin, UserOut
from services.auth import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter()


def user_out(user: dict) -> UserOut:
    return UserOut(id=user["user_id"], name=user["name"], email=user["email"], avatar=user.get("avatar"))


@router.post("/register", response_model=UserOut)
async def register(payload: UserCreate, db: Database):
    """Register a new user"""
    email = payload.email.lower()
    if await db.users.find_one({"email": email}):
        return JSONResponse(status_code=400, content={"email": "Email already exists"})

    user_doc = {
        "user_id": str(uuid.uuid4()),
        "name": payload.name,
        "email": email,
        "avatar": payload.avatar,
        "password": hash_password(payload.password),
        "created_at": datetime.now(timezone.utc),
    }
    try:
        await db.users.insert_one(user_doc)
    except DuplicateKeyError:
        return JSONResponse(status_code=400, content={"email": "Email already exists"})

    logger.info("Registered user %s", user_doc["user_id"])
    return user_out(user_doc)


@router.post("/login")
async def login(payload: UserLogin, db: Database):
    """Exchange email and password for a bearer token"""
    user = await db.users.find_one({"email": payload.email.lower()})
    if not user:
        return JSONResponse(status_code=404, content={"email": "User not found"})

    if not verify_password(payload.password, user["password"]):
        return JSONResponse(status_code=400, content={"password": "Password incorrect"})

    token = create_access_token({
        "user_id": user["user_id"],
        "name": user["name"],
        "avatar": user.get("avatar"),
    })
    return {"success": True, "token": f"Bearer {token}"}


@router.get("/current", response_model=UserOut)
async def current(current_user: CurrentUserDep, db: Database):
    """Return the user behind the bearer token"""
    user = await db.users.find_one({"user_id": current_user.id})
    if not user:
        return JSONResponse(status_code=404, content={"nouser": "User not found"})
    return user_out(user)

from typing import Optional

from pydantic import BaseModel, EmailStr


class CurrentUser(BaseModel):
    """Authenticated principal decoded from the bearer token"""
    id: str
    name: Optional[str] = None
    avatar: Optional[str] = None


class UserCreate(BaseModel):
    name: str
    email: EmailStr
    password: str
    avatar: Optional[str] = None


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserOut(BaseModel):
    id: str
    name: str
    email: EmailStr
    avatar: Optional[str] = None

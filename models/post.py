from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_object_id() -> str:
    return str(ObjectId())


class Like(BaseModel):
    user: str


class Comment(BaseModel):
    id: str = Field(default_factory=new_object_id)
    user: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    date: datetime = Field(default_factory=utcnow)


class Post(BaseModel):
    id: Optional[str] = None
    user: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    likes: List[Like] = []
    comments: List[Comment] = []
    date: datetime = Field(default_factory=utcnow)

    def liked_by(self, user_id: str) -> bool:
        return any(like.user == user_id for like in self.likes)

    def to_document(self) -> Dict[str, Any]:
        """MongoDB document for this post (without _id)"""
        return self.model_dump(exclude={"id"})

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Post":
        data = {k: v for k, v in doc.items() if k != "_id"}
        return cls(id=str(doc["_id"]), **data)


class PostInput(BaseModel):
    """Body of create-post and add-comment requests"""
    text: Optional[str] = None
    name: Optional[str] = None
    avatar: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from main import app
from services.auth import create_access_token
from services.posts import PostService
from services.store import MongoPostStore

VALID_TEXT = "A perfectly ordinary post body"


@pytest.fixture
def db():
    return AsyncMongoMockClient()["socialposts_test"]


@pytest.fixture
def store(db) -> MongoPostStore:
    return MongoPostStore(db)


@pytest.fixture
def service(store) -> PostService:
    return PostService(store)


@pytest.fixture
async def async_client(db, store):
    app.state.db = db
    app.state.post_store = store
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    """Build an Authorization header carrying a signed token for a user"""
    def _headers(user_id: str, name: str = None, avatar: str = None) -> dict:
        token = create_access_token({"user_id": user_id, "name": name, "avatar": avatar})
        return {"Authorization": f"Bearer {token}"}
    return _headers

##########
# Imports
##########
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
# MongoDB
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
import pymongo.errors

from config import DATABASE_NAME, LOG_LEVEL, MONGODB_URL, PORT
from routes.posts import router as posts_router
from routes.users import router as users_router
from services.errors import PostError
from services.store import MongoPostStore


##########
# Logging
##########
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


#####################
# FastAPI App Setup
#####################
app = FastAPI(title="Social Posts", description="Posts with likes and comments")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


######################
# Database Connection
######################
client = AsyncIOMotorClient(MONGODB_URL)
db = client[DATABASE_NAME]

app.state.db = db
app.state.post_store = MongoPostStore(db)


##############
# Error Mapping
##############
@app.exception_handler(PostError)
async def post_error_handler(request: Request, exc: PostError):
    """Render domain errors as a single-key JSON body"""
    return JSONResponse(status_code=exc.status_code, content=exc.body())


##############
# Startup Hook
##############
@app.on_event("startup")
async def startup_event():
    """Initialize DB indexes on startup"""
    try:
        await app.state.post_store.ensure_indexes()
        await app.state.db.users.create_index([("email", ASCENDING)], unique=True)
        await app.state.db.users.create_index([("user_id", ASCENDING)], unique=True)
    except pymongo.errors.PyMongoError as e:
        logger.warning("Could not create indexes on startup: %s", e)


##########
# Routes
##########
app.include_router(users_router, prefix="/api/users", tags=["users"])
app.include_router(posts_router, prefix="/api/posts", tags=["posts"])


###############
# Entry Point
###############
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)

from fastapi import APIRouter
from app.api.v1.endpoints import auth, blogs, comments, posts, users

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/sa", tags=["sa"])
api_router.include_router(blogs.admin_router, prefix="/sa", tags=["sa"])
api_router.include_router(blogs.router, tags=["blogs"])
api_router.include_router(posts.router, tags=["posts"])
api_router.include_router(comments.router, tags=["comments"])

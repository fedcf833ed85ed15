"""API router: all JSON endpoints under the /api prefix."""

from fastapi import APIRouter

from .auth.routes import router as auth_router
from .posts.routes import router as posts_router
from .profiles.routes import router as profiles_router

api_router = APIRouter(prefix="/api")

api_router.include_router(auth_router)
api_router.include_router(profiles_router)
api_router.include_router(posts_router)

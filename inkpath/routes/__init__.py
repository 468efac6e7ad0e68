"""API route handlers for inkpath."""

from fastapi import APIRouter

from .sessions import router as sessions_router
from .strokes import router as strokes_router

# Combine all routers
api_router = APIRouter()
api_router.include_router(sessions_router, tags=["sessions"])
api_router.include_router(strokes_router, tags=["strokes"])

__all__ = ["api_router"]

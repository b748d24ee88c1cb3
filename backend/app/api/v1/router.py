"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from app.api.v1.routes import tracks, ascents, stats

api_router = APIRouter()

api_router.include_router(tracks.router, tags=["Tracks"])
api_router.include_router(ascents.router, tags=["Ascents"])
api_router.include_router(stats.router, tags=["Stats"])

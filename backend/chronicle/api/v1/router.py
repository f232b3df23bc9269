from __future__ import annotations

from fastapi import APIRouter

from .endpoints import health, search, tags

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tags.router, tags=["tags"])
api_router.include_router(search.router, tags=["search"])

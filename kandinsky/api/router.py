"""Master API router, mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from kandinsky.api import demo, health, viz

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(viz.router)
api_router.include_router(demo.router)

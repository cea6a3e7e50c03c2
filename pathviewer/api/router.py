"""Master API router. Mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from pathviewer.api import editor, health, path

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(path.router)
api_router.include_router(editor.router)

"""FastAPI app factory for the path-data service."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathviewer.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pathviewer_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="PathViewer",
        description=(
            "Parse path data into its ten command kinds, edit single commands "
            "through a fixed slot layout, and scale, move or fit whole paths"
        ),
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from pathviewer.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()

"""
FastAPI application entry point for the ministry backend.

Run locally with::

    uvicorn ministry_backend.app:app --reload
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from ministry_backend.config import get_settings
from ministry_backend.routes import router


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    app = FastAPI(title="Ministry Backend (FastAPI)", version="0.1.0")
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()

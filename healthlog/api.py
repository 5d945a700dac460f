# -*- coding: utf-8 -*-
"""
Health log service API.

Receives daily health metrics from the web form and echoes stored entries back.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings as default_settings
from .logging_setup import configure_logging
from .logs.api import router as log_router
from .logs.errors import LogStoreError, ValidationError
from .logs.storage import LogStore

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


async def log_store_error_handler(request: Request, exc: LogStoreError):
    if isinstance(exc, ValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return exc.to_response()


def create_app(store: Optional[LogStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around a single owned ``LogStore``."""
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Health Log",
        description="Collects daily health metrics (nutrition, vitals, notes).",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.state.log_store = store if store is not None else LogStore(id_strategy=settings.id_strategy)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(LogStoreError, log_store_error_handler)

    @app.get("/api/health")
    def health_check():
        return {
            "status": "ok",
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    app.include_router(log_router)
    return app


app = create_app()


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logger.info("Starting health log service on %s:%s", default_settings.host, default_settings.port)
    uvicorn.run("healthlog.api:app", host=default_settings.host, port=default_settings.port, reload=False)
